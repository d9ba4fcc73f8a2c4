"""Allow ``python -m backup_manager``."""

import sys

from backup_manager.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
