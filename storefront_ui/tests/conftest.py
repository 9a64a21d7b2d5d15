"""
================================================================================
End-to-End Pytest Configuration
================================================================================

Fixtures for the storefront UI checks.

Key Features:
- One browser session per test run (SessionManager created here, released
  at the end of the run)
- Page Object fixtures bound to that session
- Shared LinkValidator for all link checks
- Screenshot after every test

================================================================================
"""

from typing import Generator

import httpx
import pytest
from loguru import logger

from storefront_ui.framework.config_loader import ConfigLoader
from storefront_ui.framework.link_validator import LinkValidator
from storefront_ui.framework.screenshots import capture_screenshot
from storefront_ui.framework.session_manager import BrowserSession, SessionManager, SessionSettings
from storefront_ui.pages.about_page import AboutPage
from storefront_ui.pages.main_page import MainPage


# ================================================================================
# Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def session_settings() -> SessionSettings:
    """Launch settings read from config/config.yaml and the environment."""
    return SessionSettings.from_config(ConfigLoader())


@pytest.fixture(scope="session")
def storefront_available(session_settings: SessionSettings) -> str:
    """
    Skip the end-to-end suite when the storefront is not reachable.

    Returns the base URL otherwise.
    """
    try:
        httpx.get(session_settings.base_url, timeout=5.0)
    except httpx.HTTPError as e:
        pytest.skip(f"Storefront not reachable at {session_settings.base_url}: {e}")
    return session_settings.base_url


@pytest.fixture(scope="session")
def session_manager(
    session_settings: SessionSettings,
    storefront_available: str,
) -> Generator[SessionManager, None, None]:
    """Session-scoped manager; the browser is released when the run ends."""
    manager = SessionManager(session_settings)
    yield manager
    manager.release()


@pytest.fixture(scope="session")
def browser_session(session_manager: SessionManager) -> BrowserSession:
    """
    The run's browser session.

    LaunchFailure is deliberately not caught: without a browser nothing can run.
    """
    return session_manager.acquire()


@pytest.fixture(scope="session")
def link_validator() -> Generator[LinkValidator, None, None]:
    """Shared link validator (one HTTP client for the whole run)."""
    timeout = float(ConfigLoader().get("link.check.timeout.seconds", 10))
    with LinkValidator(timeout=timeout) as validator:
        yield validator


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def main_page(browser_session: BrowserSession) -> MainPage:
    """MainPage, opened and verified loaded."""
    page = MainPage(browser_session).open()
    assert page.is_page_loaded(), "Main page failed to load"
    return page


@pytest.fixture
def about_page(browser_session: BrowserSession) -> AboutPage:
    """AboutPage, opened and verified loaded."""
    page = AboutPage(browser_session).open()
    assert page.is_page_loaded(), "About page failed to load"
    return page


# ================================================================================
# Test Lifecycle
# ================================================================================

@pytest.fixture(autouse=True)
def _screenshot_after_test(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Save a screenshot of the browser state after each test."""
    yield
    if "browser_session" not in request.fixturenames:
        return
    session = request.getfixturevalue("browser_session")
    path = capture_screenshot(session, request.node.name)
    if path is not None:
        logger.info(f"Screenshot for {request.node.name}: {path}")
