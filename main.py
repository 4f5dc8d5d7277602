"""PicDiskSlimmer - main entry point.

Run this file to start the app:
    python main.py

Or run as a module:
    python -m picdiskslimmer
"""

import sys
from pathlib import Path

# Add src to the import path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from picdiskslimmer.app import main

if __name__ == "__main__":
    main()
