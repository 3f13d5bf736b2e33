"""
sentry.py

Optional Sentry reporting for Etherscan calls. Every request leaves a breadcrumb and
every failed request is captured with its module and action as tags, so an event in
Sentry shows which endpoints were hit before the failure.

Sentry is off unless SENTRY_ENABLED and SENTRY_DSN are set.
"""

import sentry_sdk
from typing import Any, Optional
from etherscan_client import __version__
from etherscan_client.utils.logger import get_logger
from etherscan_client.utils.config import get_config

logger = get_logger(__name__)

_sentry_initialized = False


def init_sentry() -> bool:
    """
    Initializes the Sentry SDK from the environment configuration.

    Returns:
        bool: True if Sentry is active after the call, False otherwise.
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    config = get_config()
    if not config.SENTRY_ENABLED:
        logger.debug("Sentry is disabled via configuration")
        return False
    if not config.SENTRY_DSN:
        logger.warning("Sentry is enabled but DSN is not configured")
        return False

    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            environment=config.SENTRY_ENVIRONMENT,
            traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
            release=f"etherscan-client@{__version__}",
            attach_stacktrace=True,
            send_default_pii=False,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False

    _sentry_initialized = True
    logger.info(f"Sentry reporting enabled for {config.SENTRY_ENVIRONMENT}")
    return True


def add_breadcrumb(module: str, action: str, method: str, url: str) -> None:
    """Records one outgoing request. ``url`` must already have its API key redacted."""
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(
            category="etherscan",
            message=f"{method} {module}/{action}",
            level="info",
            data={"url": url},
        )
    except Exception as e:
        logger.error(f"Failed to add breadcrumb in Sentry: {e}")


def capture_exception(error: Exception, module: str, action: str,
                      **details: Any) -> Optional[str]:
    """
    Reports a failed call to Sentry.

    Args:
        error (Exception): The error raised to the caller.
        module (str): Etherscan module of the failed call.
        action (str): Etherscan action of the failed call.
        **details: Extra fields stored in the ``etherscan`` context (url, status code).

    Returns:
        Optional[str]: The event ID if the error was sent, None otherwise.
    """
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            scope.set_tag("etherscan.module", module)
            scope.set_tag("etherscan.action", action)
            scope.set_context("etherscan", {"module": module, "action": action, **details})
            event_id = sentry_sdk.capture_exception(error)
    except Exception as e:
        logger.error(f"Failed to capture exception in Sentry: {e}")
        return None

    logger.debug(f"{module}/{action} failure sent to Sentry as {event_id}")
    return event_id


def close_sentry(timeout: int = 2) -> None:
    """Flushes pending events; called once the CLI command has finished."""
    global _sentry_initialized

    if not _sentry_initialized:
        return

    try:
        sentry_sdk.flush(timeout=timeout)
    except Exception as e:
        logger.error(f"Failed to flush Sentry events: {e}")
    _sentry_initialized = False
