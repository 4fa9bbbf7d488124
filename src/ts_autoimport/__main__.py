"""
Entry point for module execution (``python -m ts_autoimport``).

This module delegates execution to the CLI handler in ``ts_autoimport.cli.__main__``.
"""

import sys
from ts_autoimport.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
