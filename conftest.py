"""Configure test suite environment"""
import os
import sys

# Make the src package and the tests helpers importable from the project root
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)
