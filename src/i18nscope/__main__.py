"""Entry point for `python -m i18nscope`."""

import sys

from i18nscope.cli import main

sys.exit(main())
