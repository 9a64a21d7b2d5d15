"""
================================================================================
About Page Object
================================================================================

"About Us" page: company blurb, terms-of-use link and the social media
link block.

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from playwright.sync_api import Locator

from storefront_ui.framework.locators import LocatorSpec
from storefront_ui.framework.page_base import BasePage


class AboutPage(BasePage):
    """About page object."""

    URL_PATH = "/#/about"
    PAGE_NAME = "About page"

    LOCATORS = {
        "about_section": LocatorSpec("mat-card section.about-us", description="about section"),
        "about_title": LocatorSpec("mat-card section.about-us h1", description="about title"),
        "section_headers": LocatorSpec(
            "section.about-us h3", many=True, description="section headers"
        ),
        "terms_of_use_link": LocatorSpec(
            "section.about-us p.text-justify a", description="terms of use link"
        ),
        "social_media_header": LocatorSpec("div.social h3", description="social media header"),
        "social_media_links": LocatorSpec(
            "div.social a", many=True, description="social media links"
        ),
    }
    LOADED_ANCHORS = ("about_section",)

    def get_about_title(self) -> str:
        return self.read_text("about_title")

    def get_section_headers(self) -> List[Locator]:
        return self.read_collection("section_headers")

    def get_terms_of_use_link(self) -> Locator:
        """The terms-of-use anchor, once visible. Raises WaitTimeout otherwise."""
        return self.wait_visible("terms_of_use_link")

    def get_terms_of_use_href(self) -> Optional[str]:
        return self.read_attribute("terms_of_use_link", "href")

    @allure.step("Check social media section is displayed")
    def is_social_media_section_displayed(self) -> bool:
        return self.is_displayed("social_media_header")

    def get_social_media_links(self) -> List[Locator]:
        return self.read_collection("social_media_links")

    def get_all_links(self) -> List[Locator]:
        return self.all_links()


__all__ = [
    "AboutPage",
]
