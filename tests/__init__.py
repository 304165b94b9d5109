"""Test package for Guide Analyzer.

Structure:
    - unit/: Individual function and class tests
    - integration/: Pipeline and HTTP host tests

PDF fixtures are generated in memory by conftest.py. Leverages pytest with
pytest-check for soft assertions.
"""
