"""
Root conftest: puts the repository root on sys.path so tests can import
``mesto`` without installing the package first.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
