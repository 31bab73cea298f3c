import sys

from confidential_grid.cli import main

sys.exit(main())
