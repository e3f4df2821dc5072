"""
Root conftest.py for pytest.

Sets up the Python path so "from parameterfw.X import Y" works
without installing the package.
"""
import sys
from pathlib import Path

current_dir = Path(__file__).parent

if str(current_dir) not in sys.path:
    sys.path.insert(0, str(current_dir))
