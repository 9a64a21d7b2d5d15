"""
================================================================================
Root Pytest Configuration
================================================================================

Registers the project-wide markers, tags tests by directory and initializes
logging once per run.

Settings come from config/config.yaml; any key can be overridden from the
environment (base.url -> BASE_URL), so nothing here embeds target URLs.

================================================================================
"""

from __future__ import annotations

from pathlib import Path

import pytest

from storefront_ui import __version__
from storefront_ui.framework.config_loader import ConfigLoader
from storefront_ui.framework.logging_setup import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against a running storefront"
    )
    config.addinivalue_line(
        "markers", "unit: Browserless tests of the framework itself"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Tag tests by directory: storefront_ui/tests is ui+e2e, storefront_ui/unit is unit."""
    for item in items:
        parts = Path(str(item.fspath)).parts

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)

        if "tests" in parts and "storefront_ui" in parts:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    base_url = ConfigLoader().get("base.url", "http://localhost:3000")
    return [
        "",
        "=" * 60,
        f"Storefront UI Verification {__version__}",
        f"Target: {base_url}",
        "=" * 60,
        "",
    ]
