"""
In-memory stand-ins for the Playwright objects the framework touches.

They model just enough of the sync API (locator resolution, visibility,
attributes, navigation, screenshots) to exercise pages, waits, sessions and
link checks without launching a browser.
"""

import time
from pathlib import Path
from typing import Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError


class FakeElement:
    """A DOM node: text, attributes, visibility (possibly delayed)."""

    def __init__(
        self,
        text: str = "",
        attributes: Optional[Dict[str, str]] = None,
        html: Optional[str] = None,
        visible: bool = True,
        visible_after: float = 0.0,
        enabled: bool = True,
        obscured: bool = False,
    ):
        self.text = text
        self.attributes = attributes or {}
        self.html = html if html is not None else text
        self.visible = visible
        self.enabled = enabled
        self.obscured = obscured
        self._visible_at = time.monotonic() + visible_after

    def is_visible(self) -> bool:
        return self.visible and time.monotonic() >= self._visible_at


class FakeLocator:
    """Lazily resolved locator, re-queried on every call like Playwright's."""

    def __init__(self, page: "FakePage", css: str, index: Optional[int] = None):
        self.page = page
        self.css = css
        self.index = index

    def _matches(self) -> List[FakeElement]:
        return self.page.dom.get(self.css, [])

    def _element(self) -> FakeElement:
        matches = self._matches()
        position = self.index or 0
        if position >= len(matches):
            raise PlaywrightError(f"Timeout: no element matches '{self.css}'")
        return matches[position]

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.page, self.css, 0)

    def all(self) -> List["FakeLocator"]:
        return [FakeLocator(self.page, self.css, i) for i in range(len(self._matches()))]

    def locator(self, css: str) -> "FakeLocator":
        return FakeLocator(self.page, f"{self.css} {css}")

    def is_visible(self) -> bool:
        matches = self._matches()
        position = self.index or 0
        return position < len(matches) and matches[position].is_visible()

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        conditions = {
            "visible": self.is_visible,
            "hidden": lambda: not self.is_visible(),
            "attached": lambda: (self.index or 0) < len(self._matches()),
            "detached": lambda: (self.index or 0) >= len(self._matches()),
        }
        condition = conditions[state]
        deadline = time.monotonic() + (timeout or 0) / 1000
        while not condition():
            if time.monotonic() >= deadline:
                raise PlaywrightError(
                    f"Timeout {timeout}ms exceeded.\nwaiting for '{self.css}' to be {state}"
                )
            time.sleep(0.01)

    def is_enabled(self) -> bool:
        return self._element().enabled

    def click(self, trial: bool = False, timeout: Optional[float] = None) -> None:
        if self._element().obscured:
            raise PlaywrightError("Timeout: element is obscured by another element")
        self.page.clicks.append(self.css)

    def inner_text(self) -> str:
        self.page.reads.append("inner_text")
        return self._element().text

    def inner_html(self) -> str:
        return self._element().html

    def get_attribute(self, name: str) -> Optional[str]:
        self.page.reads.append(name)
        return self._element().attributes.get(name)

    def scroll_into_view_if_needed(self) -> None:
        self._element()
        self.page.scrolled.append(self.css)

    def __repr__(self) -> str:
        return f"FakeLocator({self.css!r}, index={self.index})"


class FakePage:
    """A page whose DOM is a css -> [elements] mapping."""

    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.dom: Dict[str, List[FakeElement]] = {}
        self.visited: List[str] = []
        self.clicks: List[str] = []
        self.scrolled: List[str] = []
        self.reads: List[str] = []
        self.viewport_size = {"width": 1920, "height": 1080}
        self.default_timeout: Optional[float] = None
        self.default_navigation_timeout: Optional[float] = None
        self.screenshot_error: Optional[Exception] = None

    def add(self, css: str, *elements: FakeElement) -> "FakePage":
        self.dom.setdefault(css, []).extend(elements)
        return self

    def locator(self, css: str) -> FakeLocator:
        return FakeLocator(self, css)

    def goto(self, url: str) -> None:
        self.visited.append(url)
        self.url = url

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.default_navigation_timeout = timeout

    def screenshot(self, path: Optional[str] = None) -> bytes:
        if self.screenshot_error is not None:
            raise self.screenshot_error
        data = b"\x89PNG\r\n\x1a\nfake"
        if path:
            Path(path).write_bytes(data)
        return data


class FakeContext:
    def __init__(self, page: FakePage):
        self.page = page
        self.closed = False
        self.options: Dict = {}

    def new_page(self) -> FakePage:
        return self.page

    def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self, page: FakePage):
        self.connected = True
        self.context = FakeContext(page)
        self.launch_options: Dict = {}

    def is_connected(self) -> bool:
        return self.connected

    def new_context(self, **options) -> FakeContext:
        self.context.options = options
        return self.context

    def close(self) -> None:
        self.connected = False


class FakeChromium:
    def __init__(self, owner: "FakePlaywright"):
        self.owner = owner

    def launch(self, **options) -> FakeBrowser:
        if self.owner.launch_error is not None:
            raise self.owner.launch_error
        browser = FakeBrowser(FakePage())
        browser.launch_options = options
        self.owner.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, launch_error: Optional[Exception] = None):
        self.launch_error = launch_error
        self.browsers: List[FakeBrowser] = []
        self.stopped = False
        self.chromium = FakeChromium(self)

    def stop(self) -> None:
        self.stopped = True
