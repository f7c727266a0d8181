"""Allow running ringgraph as ``python -m ringgraph``."""

import sys

from ringgraph.cli import main

sys.exit(main())
