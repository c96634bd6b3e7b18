"""Allow running as: python -m heading_sync"""

import sys

from heading_sync.cli import main


if __name__ == "__main__":
    sys.exit(main())
