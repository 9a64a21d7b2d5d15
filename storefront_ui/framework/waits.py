# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Bounded polling for UI synchronization. Every wait produces a WaitOutcome;
# strict callers unwrap it (raising WaitTimeout), boolean callers read the flag.
#
# Key Features:
#   - Fixed-interval polling capped by a total timeout
#   - Check functions that raise count as "not ready yet" (stale or missing
#     nodes are normal while the DOM is still rendering)
#   - Visibility waits delegated to Playwright's own locator.wait_for
#   - Reusable clickability condition for Playwright locators
#
# Usage:
#   outcome = wait_for_state(locator, WaitConfig(timeout=10), "navbar")
#   element = outcome.unwrap()
#
# ================================================================================

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from loguru import logger
from playwright.sync_api import Error as PlaywrightError, Locator


T = TypeVar("T")

CheckFn = Callable[[], Tuple[bool, T]]

# Budget for Playwright's own actionability probe inside a clickability check
TRIAL_CLICK_TIMEOUT_MS = 250


class WaitTimeout(Exception):
    """Raised by strict waits when the condition did not hold in time."""

    def __init__(
        self,
        description: str,
        timeout: float,
        elapsed: float,
        last_error: Optional[str] = None,
    ) -> None:
        self.description = description
        self.timeout = timeout
        self.elapsed = elapsed
        self.last_error = last_error
        message = f"Timed out after {elapsed:.1f}s (limit {timeout}s) waiting for: {description}"
        if last_error:
            message = f"{message}. Last error: {last_error}"
        super().__init__(message)


@dataclass(frozen=True)
class WaitConfig:
    """
    Configuration for wait operations.

    Attributes:
        timeout: Total timeout in seconds
        poll_interval: Pause between checks in seconds
    """
    timeout: float = 10.0
    poll_interval: float = 0.25


@dataclass
class WaitOutcome(Generic[T]):
    """
    Result of a bounded wait.

    Attributes:
        succeeded: Whether the condition held before the timeout
        description: What was waited for (used in logs and errors)
        timeout: The limit that applied, in seconds
        value: Value produced by the successful check
        elapsed: Seconds spent waiting
        attempts: Number of checks performed
        last_error: Last exception message raised by the check, if any
    """
    succeeded: bool
    description: str
    timeout: float
    value: Optional[T] = None
    elapsed: float = 0.0
    attempts: int = 0
    last_error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.succeeded

    def unwrap(self) -> T:
        """Return the value, or raise WaitTimeout if the wait failed."""
        if not self.succeeded:
            raise WaitTimeout(
                self.description, self.timeout, self.elapsed, self.last_error
            )
        return self.value


def poll_until(
    check_fn: CheckFn,
    config: WaitConfig,
    description: str = "condition",
) -> WaitOutcome:
    """
    Poll check_fn until it reports success or the timeout elapses.

    Args:
        check_fn: Function that returns (success: bool, result: T)
        config: Timeout and polling interval
        description: Human-readable description for logging

    Returns:
        WaitOutcome describing success or timeout. Never raises for timeouts.
    """
    start_time = time.monotonic()
    deadline = start_time + config.timeout
    attempts = 0
    last_error: Optional[str] = None

    while True:
        attempts += 1
        try:
            success, result = check_fn()
            if success:
                elapsed = time.monotonic() - start_time
                logger.debug(
                    f"Wait satisfied after {attempts} attempt(s) ({elapsed:.2f}s): {description}"
                )
                return WaitOutcome(
                    succeeded=True,
                    description=description,
                    timeout=config.timeout,
                    value=result,
                    elapsed=elapsed,
                    attempts=attempts,
                    last_error=last_error,
                )
        except Exception as e:
            last_error = str(e).splitlines()[0] if str(e) else type(e).__name__

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        time.sleep(min(config.poll_interval, remaining))

    elapsed = time.monotonic() - start_time
    logger.warning(
        f"Wait timed out after {elapsed:.2f}s ({attempts} attempts): {description}"
        + (f" | last error: {last_error}" if last_error else "")
    )
    return WaitOutcome(
        succeeded=False,
        description=description,
        timeout=config.timeout,
        elapsed=elapsed,
        attempts=attempts,
        last_error=last_error,
    )


def wait_for_state(
    locator: Locator,
    config: WaitConfig,
    description: str = "element",
    state: str = "visible",
) -> WaitOutcome:
    """
    Let Playwright wait for the element state and report it as a WaitOutcome.

    Args:
        locator: Element to wait on
        config: Timeout (poll_interval is unused; Playwright drives the wait)
        description: Human-readable description for logging
        state: "attached", "detached", "visible" or "hidden"

    Returns:
        WaitOutcome whose value is the locator. Never raises for timeouts.
    """
    start_time = time.monotonic()
    try:
        locator.wait_for(state=state, timeout=config.timeout * 1000)
    except PlaywrightError as e:
        elapsed = time.monotonic() - start_time
        last_error = str(e).splitlines()[0] if str(e) else type(e).__name__
        logger.warning(f"Wait timed out after {elapsed:.2f}s: {description} | last error: {last_error}")
        return WaitOutcome(
            succeeded=False,
            description=description,
            timeout=config.timeout,
            elapsed=elapsed,
            attempts=1,
            last_error=last_error,
        )

    elapsed = time.monotonic() - start_time
    logger.debug(f"Wait satisfied ({elapsed:.2f}s): {description}")
    return WaitOutcome(
        succeeded=True,
        description=description,
        timeout=config.timeout,
        value=locator,
        elapsed=elapsed,
        attempts=1,
    )


# =============================================================================
# Conditions
# =============================================================================

def clickable(locator: Locator) -> CheckFn:
    """
    Condition: visible, enabled and not obscured.

    The obscured check is a trial click, which runs Playwright's actionability
    checks (stable, receives pointer events) without dispatching the click.
    """

    def check() -> Tuple[bool, Locator]:
        if not (locator.is_visible() and locator.is_enabled()):
            return False, locator
        locator.click(trial=True, timeout=TRIAL_CLICK_TIMEOUT_MS)
        return True, locator

    return check


__all__ = [
    "WaitConfig",
    "WaitOutcome",
    "WaitTimeout",
    "poll_until",
    "wait_for_state",
    "clickable",
]
