"""Run the interactive simulator: ``python -m rocketsim``."""

import sys

from rocketsim.console import main

if __name__ == "__main__":
    sys.exit(main())
