"""
Root conftest.py for pytest configuration
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.absolute()
SRC_PATH = PROJECT_ROOT / "src"

# Allow running the suite from a checkout without installing the package
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))
