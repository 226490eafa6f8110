import sys
from pathlib import Path


# Ensure the repository root (parent of this file's directory) is importable when running pytest
THIS_DIR = Path(__file__).resolve().parent
ROOT_DIR = THIS_DIR.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))
