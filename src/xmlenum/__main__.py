"""Allow running the tool as ``python -m xmlenum``."""

import sys

from xmlenum.cli import main

sys.exit(main())
