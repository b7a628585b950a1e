import sys

from miniball_d.cli import main

sys.exit(main())
