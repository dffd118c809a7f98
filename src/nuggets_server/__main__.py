"""Allow running as python -m nuggets_server."""

import sys
from .cli import main

sys.exit(main())
