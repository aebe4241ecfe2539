"""Allow ``python -m hubctl``."""

import sys

from .cli import main

sys.exit(main())
