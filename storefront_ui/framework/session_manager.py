"""
================================================================================
Session Manager
================================================================================

Browser session lifecycle management for UI verification.

Features:
    - One live browser session per manager, created lazily on acquire()
    - Fixed launch flags for containerized headless Chromium
    - Configured element-wait and page-load timeouts applied to the page
    - Launch failures surface as LaunchFailure and are never swallowed

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from .config_loader import ConfigLoader


class LaunchFailure(RuntimeError):
    """Raised when the browser session cannot be started. Not recoverable."""
    pass


@dataclass(frozen=True)
class SessionSettings:
    """
    Launch and timeout settings for a browser session.

    Attributes:
        base_url: Storefront root URL
        implicit_wait_seconds: Element wait budget (also the explicit wait timeout)
        page_load_timeout_seconds: Navigation timeout
        headless: Run without a visible window
        window_width: Window and viewport width
        window_height: Window and viewport height
    """
    base_url: str = "http://localhost:3000"
    implicit_wait_seconds: int = 10
    page_load_timeout_seconds: int = 30
    headless: bool = True
    window_width: int = 1920
    window_height: int = 1080

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "SessionSettings":
        """Build settings from base.url / implicit.wait.seconds / page.load.timeout.seconds."""
        config = config or ConfigLoader()
        return cls(
            base_url=str(config.get("base.url", cls.base_url)).rstrip("/"),
            implicit_wait_seconds=config.get_int("implicit.wait.seconds", cls.implicit_wait_seconds),
            page_load_timeout_seconds=config.get_int(
                "page.load.timeout.seconds", cls.page_load_timeout_seconds
            ),
            headless=config.get_bool("browser.headless", cls.headless),
        )

    @property
    def launch_args(self) -> List[str]:
        """Chromium command-line flags."""
        return [
            "--disable-gpu",
            "--no-sandbox",
            "--disable-dev-shm-usage",
            f"--window-size={self.window_width},{self.window_height}",
            "--start-maximized",
        ]

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.window_width, "height": self.window_height}


@dataclass
class BrowserSession:
    """
    Handle to a running browser under automated control.

    Pages and the link validator hold a reference to it and treat it as
    read-only; only SessionManager creates and terminates it.
    """
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page
    settings: SessionSettings
    closed: bool = False

    @property
    def is_live(self) -> bool:
        """True until close() is called or the browser disconnects."""
        return not self.closed and self.browser.is_connected()

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def implicit_wait_seconds(self) -> int:
        return self.settings.implicit_wait_seconds

    @property
    def page_load_timeout_seconds(self) -> int:
        return self.settings.page_load_timeout_seconds

    @property
    def viewport(self) -> Optional[Dict[str, int]]:
        """Current viewport size as reported by the page."""
        return self.page.viewport_size

    def close(self) -> None:
        """Terminate context, browser and driver. Safe to call twice."""
        if self.closed:
            return
        self.closed = True

        try:
            self.context.close()
        except PlaywrightError as e:
            logger.debug(f"Context already gone: {e}")

        try:
            self.browser.close()
        finally:
            self.playwright.stop()

        logger.info("Browser session closed")


class SessionManager:
    """
    Owns at most one live BrowserSession.

    There is no module-level instance: the test-suite setup creates one
    manager and threads the acquired session into every page object.

    Usage:
        with SessionManager(SessionSettings.from_config()) as manager:
            session = manager.acquire()
            MainPage(session).open()
    """

    def __init__(self, settings: Optional[SessionSettings] = None) -> None:
        """
        Initialize session manager.

        Args:
            settings: Launch settings. Read from configuration if None.
        """
        self.settings = settings or SessionSettings.from_config()
        self._session: Optional[BrowserSession] = None

    def __enter__(self) -> "SessionManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    @property
    def session(self) -> Optional[BrowserSession]:
        """The current session, live or not, or None."""
        return self._session

    def acquire(self) -> BrowserSession:
        """
        Return the live session, launching one if needed.

        Raises:
            LaunchFailure: The browser could not be started
        """
        if self._session is not None and self._session.is_live:
            return self._session

        if self._session is not None:
            logger.warning("Previous browser session is no longer live, relaunching")
            self._discard()

        self._session = self._launch()
        return self._session

    def release(self) -> None:
        """Terminate the live session, if any."""
        if self._session is None:
            return
        session, self._session = self._session, None
        session.close()

    def _discard(self) -> None:
        session, self._session = self._session, None
        try:
            session.close()
        except PlaywrightError as e:
            logger.debug(f"Ignoring teardown error of dead session: {e}")

    def _launch(self) -> BrowserSession:
        settings = self.settings
        resources: List[Any] = []

        try:
            playwright = sync_playwright().start()
            resources.append(playwright)

            browser = playwright.chromium.launch(
                headless=settings.headless,
                args=settings.launch_args,
            )
            resources.append(browser)

            context = browser.new_context(viewport=settings.viewport)
            resources.append(context)

            page = context.new_page()
            page.set_default_timeout(settings.implicit_wait_seconds * 1000)
            page.set_default_navigation_timeout(settings.page_load_timeout_seconds * 1000)
        except PlaywrightError as e:
            self._teardown_partial(resources)
            logger.error(f"Browser launch failed: {e}")
            raise LaunchFailure(f"Unable to start browser session: {e}") from e

        logger.info(
            f"Browser session started (headless={settings.headless}, "
            f"implicit_wait={settings.implicit_wait_seconds}s, "
            f"page_load_timeout={settings.page_load_timeout_seconds}s)"
        )
        return BrowserSession(
            playwright=playwright,
            browser=browser,
            context=context,
            page=page,
            settings=settings,
        )

    @staticmethod
    def _teardown_partial(resources: List[Any]) -> None:
        """Close whatever was created before the launch failed, newest first."""
        for resource in reversed(resources):
            closer = getattr(resource, "close", None) or resource.stop
            try:
                closer()
            except PlaywrightError as e:
                logger.debug(f"Cleanup after failed launch: {e}")


__all__ = [
    "BrowserSession",
    "LaunchFailure",
    "SessionManager",
    "SessionSettings",
]
