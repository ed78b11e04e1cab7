"""Allow ``python -m number_pipeline``."""

import sys

from number_pipeline.cli import main

sys.exit(main())
