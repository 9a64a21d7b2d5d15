"""
================================================================================
Main Page Object
================================================================================

Storefront landing page: navigation bar, welcome section and the welcome
banner dialog shown on first visit.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure
from playwright.sync_api import Locator

from storefront_ui.framework.locators import LocatorSpec
from storefront_ui.framework.page_base import BasePage


class MainPage(BasePage):
    """Main (landing) page object."""

    URL_PATH = ""
    PAGE_NAME = "Main page"

    LOCATORS = {
        "navbar": LocatorSpec("app-navbar", description="navigation bar"),
        "welcome_section": LocatorSpec("app-welcome", description="welcome section"),
        "welcome_banner": LocatorSpec("app-welcome-banner", description="welcome banner"),
        "welcome_title": LocatorSpec("app-welcome-banner h1", description="welcome title"),
        "welcome_message": LocatorSpec(
            "app-welcome-banner div.text-justify", description="welcome message"
        ),
        "welcome_buttons": LocatorSpec(
            "app-welcome-banner button.mat-raised-button",
            many=True,
            description="welcome buttons",
        ),
    }
    LOADED_ANCHORS = ("navbar", "welcome_section")

    @allure.step("Check welcome banner is displayed")
    def is_welcome_banner_displayed(self) -> bool:
        return self.is_displayed("welcome_banner")

    def get_welcome_title(self) -> str:
        """Banner heading text. Raises WaitTimeout if the banner never renders."""
        return self.read_text("welcome_title")

    def get_welcome_message(self) -> str:
        """Banner body as inner HTML (it contains markup such as links)."""
        return self.read_html("welcome_message")

    def get_welcome_buttons(self) -> List[Locator]:
        return self.read_collection("welcome_buttons")

    def get_all_links(self) -> List[Locator]:
        return self.all_links()


__all__ = [
    "MainPage",
]
