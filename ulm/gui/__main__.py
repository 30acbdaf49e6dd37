"""Entry point for the GUI application.

Usage:
    python -m ulm.gui
"""

import sys

if __name__ == "__main__":
    from ulm.gui.app import main

    sys.exit(main())
