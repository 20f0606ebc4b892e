"""
Login suite package.

Page Object Model UI tests for the-internet.herokuapp.com login page.
Kept importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports
"""

__version__ = "1.0.0"
