#!/usr/bin/env python3
"""Run the file sorter test suite: python tests/run_tests.py [PATTERN]"""
import unittest
import sys
import os


def run_tests(pattern: str = 'test_*.py') -> bool:
    # Make file_sorter importable without installing it
    sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

    suite = unittest.TestLoader().discover(os.path.dirname(__file__), pattern=pattern)
    result = unittest.TextTestRunner(verbosity=2, buffer=True).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_tests(*sys.argv[1:2]) else 1)
