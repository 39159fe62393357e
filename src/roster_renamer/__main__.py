import sys

from roster_renamer.cli import main

sys.exit(main())
