import sys

from raur.cli import main

sys.exit(main())
