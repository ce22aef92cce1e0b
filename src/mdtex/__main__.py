"""Allow ``python -m mdtex``."""

import sys

from mdtex.cli import main

sys.exit(main())
