import sys

from ulc.cli import main

sys.exit(main())
