"""
================================================================================
UI Verification Framework
================================================================================

Playwright-based building blocks for storefront UI checks.

Components:
    - config_loader: YAML + environment configuration
    - logging_setup: loguru initialization
    - session_manager: browser session lifecycle
    - waits: bounded polling with explicit outcomes
    - locators: declarative element locators
    - page_base: base page object and page capability contract
    - link_validator: hyperlink reachability checks
    - screenshots: post-test screenshot capture

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .link_validator import LinkCheck, LinkDescriptor, LinkValidator, get_link_text, is_link_valid
from .locators import LocatorSpec, UnknownLocator
from .page_base import BasePage, PageCapabilities
from .session_manager import BrowserSession, LaunchFailure, SessionManager, SessionSettings
from .waits import WaitConfig, WaitOutcome, WaitTimeout

__all__ = [
    "BasePage",
    "BrowserSession",
    "ConfigLoader",
    "ConfigurationError",
    "LaunchFailure",
    "LinkCheck",
    "LinkDescriptor",
    "LinkValidator",
    "LocatorSpec",
    "PageCapabilities",
    "SessionManager",
    "SessionSettings",
    "UnknownLocator",
    "WaitConfig",
    "WaitOutcome",
    "WaitTimeout",
    "get_link_text",
    "is_link_valid",
]
