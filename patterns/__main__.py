"""Run every pattern demo: ``python -m patterns``."""

import sys

from patterns.showcase import run

if __name__ == "__main__":
    sys.exit(run())
