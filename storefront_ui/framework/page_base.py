"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the storefront base URL
    - On-demand resolution of declared locators
    - Bounded visibility / clickability waits
    - Total, exception-free "is loaded" / "is displayed" checks

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Tuple, TypeVar, Union

import allure
from loguru import logger
from playwright.sync_api import Locator, Page

from .locators import LINK_LOCATOR, LocatorSpec, lookup
from .session_manager import BrowserSession
from .waits import WaitConfig, WaitOutcome, clickable, poll_until, wait_for_state


# A target is either a declared element name or a ready-made locator
Target = Union[str, Locator]

P = TypeVar("P", bound="BasePage")


class PageCapabilities(Protocol):
    """Operations every concrete page offers."""

    def open(self) -> "PageCapabilities":
        ...

    def is_page_loaded(self) -> bool:
        ...

    def wait_visible(self, target: Target) -> Locator:
        ...

    def wait_clickable(self, target: Target) -> Locator:
        ...

    def all_links(self) -> List[Locator]:
        ...


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare:
        URL_PATH: Suffix appended to the base URL by open()
        LOCATORS: Field name -> LocatorSpec
        LOADED_ANCHORS: Names that must be visible once the page has rendered

    Usage:
        class AboutPage(BasePage):
            URL_PATH = "/#/about"
            LOCATORS = {"about_section": LocatorSpec("section.about-us")}
            LOADED_ANCHORS = ("about_section",)
    """

    # Override in subclasses
    URL_PATH: str = ""
    PAGE_NAME: str = "page"
    LOCATORS: Dict[str, LocatorSpec] = {}
    LOADED_ANCHORS: Tuple[str, ...] = ()

    def __init__(
        self,
        session: BrowserSession,
        base_url: Optional[str] = None,
    ):
        """
        Initialize page object.

        Args:
            session: Live browser session
            base_url: Storefront root. Defaults to the session's configured base URL.
        """
        self.session = session
        self.base_url = (base_url or session.base_url).rstrip("/")
        self.wait_config = WaitConfig(timeout=float(session.implicit_wait_seconds))

    @property
    def page(self) -> Page:
        return self.session.page

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    def open(self: P) -> P:
        """Navigate to this page and return it."""
        with allure.step(f"Open {self.PAGE_NAME}: {self.url}"):
            self.page.goto(self.url)
            logger.debug(f"Navigated to: {self.url}")
        return self

    # =========================================================================
    # Locator Resolution
    # =========================================================================

    def locate(self, name: str) -> Locator:
        """Resolve a declared element against the current DOM."""
        return lookup(self.LOCATORS, name, self.PAGE_NAME).resolve(self.page)

    def locate_all(self, name: str) -> List[Locator]:
        """Resolve a declared collection to one locator per current match."""
        spec = lookup(self.LOCATORS, name, self.PAGE_NAME)
        return spec.resolve(self.page).all() if spec.many else [spec.resolve(self.page)]

    def _target(self, target: Target) -> Tuple[Locator, str]:
        if isinstance(target, str):
            spec = lookup(self.LOCATORS, target, self.PAGE_NAME)
            # Collections are waited on through their first member
            locator = spec.resolve(self.page)
            if spec.many:
                locator = locator.first
            return locator, spec.description or target
        return target, str(target)

    # =========================================================================
    # Waits
    # =========================================================================

    def wait_for_visible(self, target: Target) -> WaitOutcome:
        """Wait for visibility and report the outcome without raising."""
        locator, label = self._target(target)
        return wait_for_state(locator, self.wait_config, f"{label} visible")

    def wait_for_clickable(self, target: Target) -> WaitOutcome:
        """Wait for clickability and report the outcome without raising."""
        locator, label = self._target(target)
        return poll_until(clickable(locator), self.wait_config, f"{label} clickable")

    def wait_visible(self, target: Target) -> Locator:
        """
        Wait until the element is visible.

        Raises:
            WaitTimeout: Not visible within the session's wait timeout
        """
        return self.wait_for_visible(target).unwrap()

    def wait_clickable(self, target: Target) -> Locator:
        """
        Wait until the element is visible, enabled and not obscured.

        Raises:
            WaitTimeout: Not clickable within the session's wait timeout
        """
        return self.wait_for_clickable(target).unwrap()

    # =========================================================================
    # Readiness Checks
    # =========================================================================

    def is_displayed(self, target: Target) -> bool:
        """True if the element becomes visible in time. Never raises for timeouts."""
        return self.wait_for_visible(target).succeeded

    def is_page_loaded(self) -> bool:
        """True when every anchor element became visible in time."""
        with allure.step(f"Check {self.PAGE_NAME} loaded"):
            for name in self.LOADED_ANCHORS:
                if not self.is_displayed(name):
                    logger.warning(f"{self.PAGE_NAME} not loaded: '{name}' never became visible")
                    return False
        return True

    # =========================================================================
    # Reads
    # =========================================================================

    def read_text(self, name: str) -> str:
        """Wait for the element, then return its rendered text."""
        return self.wait_visible(name).inner_text()

    def read_html(self, name: str) -> str:
        """Wait for the element, then return its inner HTML."""
        return self.wait_visible(name).inner_html()

    def read_attribute(self, name: str, attribute: str) -> Optional[str]:
        """Wait for the element, then return one of its attributes."""
        return self.wait_visible(name).get_attribute(attribute)

    def read_collection(self, name: str) -> List[Locator]:
        """Wait for the first member, then return all members (empty on timeout)."""
        if not self.wait_for_visible(name):
            return []
        return self.locate_all(name)

    def scroll_to(self, target: Target) -> None:
        """Scroll the element into view."""
        locator, _ = self._target(target)
        locator.scroll_into_view_if_needed()

    def all_links(self) -> List[Locator]:
        """Every hyperlink-tagged element currently in the DOM."""
        return LINK_LOCATOR.resolve(self.page).all()


__all__ = [
    "BasePage",
    "PageCapabilities",
    "Target",
]
