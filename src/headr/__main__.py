"""Entry point for ``python -m headr``."""

import sys

from headr.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
