"""
================================================================================
Link Validator
================================================================================

Hyperlink checks over located elements.

Rules, in order:
    1. Missing or empty href -> invalid
    2. javascript: URIs and same-page fragments (#...) -> valid without any
       network access (they are intentionally not externally resolvable)
    3. Anything else -> HEAD request; valid iff a response arrives with a
       status code below 400

A broken link is a validation result, never an error: connection failures,
timeouts and malformed URLs all come back as "invalid".

Usage:
    >>> with LinkValidator() as validator:
    ...     for link in about_page.get_all_links():
    ...         assert validator.is_link_valid(link), validator.get_link_text(link)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urljoin, urlparse

import allure
import httpx
from loguru import logger
from playwright.sync_api import Error as PlaywrightError


JAVASCRIPT_SCHEME = "javascript:"
FRAGMENT_PREFIX = "#"

# Seconds allowed for connect + response of a single HEAD request
DEFAULT_TIMEOUT = 10.0

# First status code treated as broken
ERROR_STATUS_THRESHOLD = 400


class NetworkFailure(Exception):
    """A link could not be fetched (refused, timed out, malformed URL)."""
    pass


@dataclass(frozen=True)
class LinkDescriptor:
    """
    Read-only view of a hyperlink element.

    Attributes:
        href: Raw href attribute (None when absent)
        text: Trimmed visible text
        aria_label: aria-label attribute
        title: title attribute
    """
    href: Optional[str]
    text: str = ""
    aria_label: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_element(cls, element: Any) -> "LinkDescriptor":
        """Read href, visible text, aria-label and title from an element handle."""
        return cls(
            href=element.get_attribute("href"),
            text=(element.inner_text() or "").strip(),
            aria_label=element.get_attribute("aria-label"),
            title=element.get_attribute("title"),
        )

    @property
    def label(self) -> Optional[str]:
        """First non-empty of: text, aria-label, title; otherwise the raw href."""
        for candidate in (self.text, self.aria_label, self.title):
            if candidate:
                return candidate
        return self.href

    @property
    def is_in_page(self) -> bool:
        """javascript: URI or same-page fragment."""
        href = self.href or ""
        return href.startswith(JAVASCRIPT_SCHEME) or href.startswith(FRAGMENT_PREFIX)


@dataclass(frozen=True)
class LinkCheck:
    """
    Outcome of one link check, for assertions and reporting.

    Attributes:
        label: Human-readable link identifier
        url: URL that was checked (absolute when a request was made)
        valid: Whether the link counts as working
        status_code: HTTP status when a response arrived
        reason: Short explanation of the verdict
    """
    label: Optional[str]
    url: Optional[str]
    valid: bool
    status_code: Optional[int] = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid


class LinkValidator:
    """
    Validates hyperlinks found by page objects.

    Holds one httpx.Client for all checks in a run. A client passed in by the
    caller is used as-is and left open; otherwise the validator creates and
    closes its own.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize link validator.

        Args:
            timeout: Per-request timeout in seconds
            client: Existing HTTP client to reuse
        """
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    def __enter__(self) -> "LinkValidator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this validator created it."""
        if self._owns_client:
            self._client.close()

    def is_link_valid(self, element: Any) -> bool:
        """
        True if the element's href is in-page or answers with status < 400.

        Only the href is read; an element that can no longer be read is invalid.
        """
        try:
            href = element.get_attribute("href")
        except PlaywrightError as e:
            return self._report(LinkCheck(None, None, False, reason=_unreadable(e))).valid
        return self._report(self._evaluate(href, element, label=href)).valid

    @staticmethod
    def get_link_text(element: Any) -> Optional[str]:
        """Visible text, else aria-label, else title, else the raw href."""
        return LinkDescriptor.from_element(element).label

    def check(self, element: Any) -> LinkCheck:
        """Run the full link check on an element and report it with its readable label."""
        try:
            link = LinkDescriptor.from_element(element)
        except PlaywrightError as e:
            return self._report(LinkCheck(None, None, False, reason=_unreadable(e)))
        return self._report(self._evaluate(link.href, element, label=link.label))

    def _evaluate(self, href: Optional[str], element: Any, label: Optional[str]) -> LinkCheck:
        if not href:
            return LinkCheck(label, href, False, reason="missing href")
        if LinkDescriptor(href=href).is_in_page:
            return LinkCheck(label, href, True, reason="in-page link")

        try:
            url = _absolute_url(href, element)
        except ValueError as e:
            return LinkCheck(label, href, False, reason=f"malformed URL: {e}")
        return self.check_url(url, label=label)

    @staticmethod
    def _report(result: LinkCheck) -> LinkCheck:
        if result.valid:
            logger.debug(f"Link OK: {result.label} -> {result.url} ({result.reason})")
        else:
            logger.warning(f"Broken link: {result.label} -> {result.url} ({result.reason})")
        return result

    def check_url(self, url: str, label: Optional[str] = None) -> LinkCheck:
        """HEAD the URL; any network failure yields an invalid result."""
        label = label or url
        with allure.step(f"HEAD {url}"):
            try:
                status_code = self._head(url)
            except NetworkFailure as e:
                return LinkCheck(label, url, False, reason=str(e))

        valid = status_code < ERROR_STATUS_THRESHOLD
        return LinkCheck(label, url, valid, status_code=status_code, reason=f"HTTP {status_code}")

    def _head(self, url: str) -> int:
        try:
            response = self._client.head(url)
        except httpx.TimeoutException as e:
            raise NetworkFailure(f"timeout: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{type(e).__name__}: {e}") from e
        except (httpx.InvalidURL, ValueError) as e:
            raise NetworkFailure(f"malformed URL: {e}") from e
        return response.status_code


def _unreadable(error: Exception) -> str:
    return f"unreadable link: {str(error).splitlines()[0] if str(error) else type(error).__name__}"


def _absolute_url(href: str, element: Any) -> str:
    """Resolve a relative href against the URL of the page owning the element."""
    if urlparse(href).scheme:
        return href
    page = getattr(element, "page", None)
    base = getattr(page, "url", None)
    return urljoin(base, href) if base else href


# =============================================================================
# Convenience Functions
# =============================================================================

def is_link_valid(element: Any, client: Optional[httpx.Client] = None) -> bool:
    """One-off link check. Prefer a shared LinkValidator for many links."""
    with LinkValidator(client=client) as validator:
        return validator.is_link_valid(element)


def get_link_text(element: Any) -> Optional[str]:
    """Human-readable identifier for a link element."""
    return LinkValidator.get_link_text(element)


__all__ = [
    "LinkCheck",
    "LinkDescriptor",
    "LinkValidator",
    "NetworkFailure",
    "get_link_text",
    "is_link_valid",
]
