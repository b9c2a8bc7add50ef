"""Allow ``python -m critters``."""

import sys

from critters.main import main

sys.exit(main())
