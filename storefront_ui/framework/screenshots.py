"""
================================================================================
Screenshot Capture
================================================================================

Saves the current browser state after a test as <test_name>_<timestamp>.png
and attaches it to the Allure report. Capture is best-effort: a failure is
logged and never fails the test.

================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from .config_loader import ConfigLoader
from .session_manager import BrowserSession


DEFAULT_SCREENSHOT_DIR = "reports/screenshots"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

_UNSAFE_CHARS = re.compile(r"[\\/:*?\"<>|\s]+")


def screenshot_dir(config: Optional[ConfigLoader] = None) -> Path:
    """Directory configured under screenshot.dir."""
    config = config or ConfigLoader()
    return Path(config.get("screenshot.dir", DEFAULT_SCREENSHOT_DIR))


def screenshot_filename(test_name: str, now: Optional[datetime] = None) -> str:
    """<test_name>_<yyyyMMdd_HHmmss>.png with path-hostile characters replaced."""
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    safe_name = _UNSAFE_CHARS.sub("_", test_name).strip("_") or "screenshot"
    return f"{safe_name}_{timestamp}.png"


def capture_screenshot(
    session: Optional[BrowserSession],
    test_name: str,
    directory: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """
    Take a screenshot of the session's page.

    Args:
        session: Browser session (None or closed sessions are skipped)
        test_name: Name used as the file name prefix
        directory: Output directory. Defaults to screenshot.dir from config.

    Returns:
        Path to the saved file, or None when nothing was written
    """
    if session is None or not session.is_live:
        logger.debug(f"No live browser session, skipping screenshot for {test_name}")
        return None

    target_dir = Path(directory) if directory else screenshot_dir()
    filepath = target_dir / screenshot_filename(test_name)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        png = session.page.screenshot(path=str(filepath))
    except (PlaywrightError, OSError) as e:
        logger.warning(f"Failed to capture screenshot for {test_name}: {e}")
        return None

    allure.attach(
        png,
        name=test_name,
        attachment_type=allure.attachment_type.PNG,
    )
    logger.debug(f"Screenshot saved: {filepath}")
    return filepath


__all__ = [
    "capture_screenshot",
    "screenshot_dir",
    "screenshot_filename",
]
