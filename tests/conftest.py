import sys
import os

# Make the shared sample tables importable from every test subdirectory
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)
