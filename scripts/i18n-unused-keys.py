#!/usr/bin/env python3

"""Run the i18n unused key cleaner from a checkout: python scripts/i18n-unused-keys.py --help"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from i18n_tools.unused_keys import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())
