"""
================================================================================
Locator Declarations
================================================================================

Named, declarative element locators for page objects.

Pages declare a mapping of field name -> LocatorSpec and resolve it on demand.
Resolution always builds a fresh Playwright locator against the current DOM,
so nothing found before a navigation is reused afterwards.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from playwright.sync_api import Locator, Page


class UnknownLocator(KeyError):
    """Raised when a page asks for an element name it never declared."""
    pass


@dataclass(frozen=True)
class LocatorSpec:
    """
    Declarative description of one element or a collection of elements.

    Attributes:
        css: CSS selector
        many: True for collections (resolved to every match)
        description: Human-readable name for logs and Allure steps
    """
    css: str
    many: bool = False
    description: str = ""

    def resolve(self, page: Page) -> Locator:
        """Build a fresh locator; single elements resolve to the first match."""
        locator = page.locator(self.css)
        return locator if self.many else locator.first


# Every hyperlink-tagged element
LINK_LOCATOR = LocatorSpec("a", many=True, description="hyperlinks")


def lookup(locators: Dict[str, LocatorSpec], name: str, owner: str = "page") -> LocatorSpec:
    """
    Find the spec declared under name.

    Raises:
        UnknownLocator: name is not declared by owner
    """
    try:
        return locators[name]
    except KeyError:
        raise UnknownLocator(
            f"{owner} declares no locator named '{name}'. "
            f"Known: {', '.join(sorted(locators)) or '<none>'}"
        ) from None


__all__ = [
    "LINK_LOCATOR",
    "LocatorSpec",
    "UnknownLocator",
    "lookup",
]
