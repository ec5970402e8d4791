"""Entry point for ``python -m mcpctl``."""

import sys

from mcpctl.cli import main

if __name__ == "__main__":
    sys.exit(main())
