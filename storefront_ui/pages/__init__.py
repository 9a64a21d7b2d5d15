"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for storefront pages.

Each page class declares:
    - Element locators (resolved on demand)
    - Anchor elements that signal the page has rendered
    - Page-specific read and verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .about_page import AboutPage
from .main_page import MainPage

__all__ = [
    "AboutPage",
    "MainPage",
]
