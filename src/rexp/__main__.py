"""Allow ``python -m rexp``."""

import sys

from rexp.ui.cli.cli import main

sys.exit(main())
