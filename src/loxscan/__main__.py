"""Entry point for ``python -m loxscan``."""

import sys

from loxscan.cli import main

sys.exit(main())
