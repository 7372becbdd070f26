"""Allow ``python -m sol_anchor_gen``."""

import sys

from sol_anchor_gen.cli import main

sys.exit(main())
