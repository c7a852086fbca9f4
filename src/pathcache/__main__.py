"""Allow ``python -m pathcache``."""

from __future__ import annotations

import sys

from pathcache.cli.main import main

sys.exit(main())
