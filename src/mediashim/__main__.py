"""Allow ``python -m mediashim``."""

import sys

from mediashim.cli import main

sys.exit(main())
