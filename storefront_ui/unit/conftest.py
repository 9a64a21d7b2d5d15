"""
Fixtures for browserless unit tests.

Fakes live in storefront_ui.unit.fakes; these fixtures wire them into a
BrowserSession the framework can use.
"""

import pytest

from storefront_ui.framework.config_loader import ConfigLoader
from storefront_ui.framework.session_manager import BrowserSession, SessionSettings
from storefront_ui.framework.waits import WaitConfig
from storefront_ui.unit.fakes import FakeBrowser, FakeElement, FakePage, FakePlaywright


# Keys that would otherwise leak from the developer shell or CI into unit tests
CONFIG_ENV_VARS = (
    "BASE_URL",
    "IMPLICIT_WAIT_SECONDS",
    "PAGE_LOAD_TIMEOUT_SECONDS",
    "LINK_CHECK_TIMEOUT_SECONDS",
    "SCREENSHOT_DIR",
    "BROWSER_HEADLESS",
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Fresh ConfigLoader singleton and no configuration env overrides."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def fake_session(fake_page: FakePage) -> BrowserSession:
    """A live BrowserSession backed by fakes."""
    browser = FakeBrowser(fake_page)
    return BrowserSession(
        playwright=FakePlaywright(),
        browser=browser,
        context=browser.context,
        page=fake_page,
        settings=SessionSettings(base_url="http://shop.test", implicit_wait_seconds=1),
    )


@pytest.fixture
def make_link(fake_page: FakePage):
    """Build a link locator on fake_page with the given text and attributes."""
    counter = {"n": 0}

    def _make(text: str = "", **attributes: str):
        counter["n"] += 1
        css = f"a#link-{counter['n']}"
        attrs = {key.replace("_", "-"): value for key, value in attributes.items()}
        fake_page.add(css, FakeElement(text=text, attributes=attrs))
        return fake_page.locator(css).first

    return _make


@pytest.fixture
def fast_wait() -> WaitConfig:
    return WaitConfig(timeout=0.3, poll_interval=0.02)
