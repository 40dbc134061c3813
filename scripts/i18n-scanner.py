#!/usr/bin/env python3

"""Run the i18n hardcoded text scanner from a checkout: python scripts/i18n-scanner.py --help"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from i18n_tools.scan import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())
