"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

================================================================================
"""

from .login_page import LoginPage

__all__ = [
    "LoginPage",
]
