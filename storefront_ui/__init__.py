"""
Storefront UI verification suite.

Packages:
  - framework: browser session, page base, waits, link validation
  - pages: page objects for the storefront
  - tests: end-to-end checks against a running storefront
  - unit: browserless tests of the framework
"""

__version__ = "1.0.0"
