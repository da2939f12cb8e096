import asyncio
import logging
import sys
import traceback

logger = logging.getLogger(__name__)


def global_exception_hook(exctype, value, tb):
    """
    Catches any uncaught exception in the application and logs it instead of
    letting it take down the Qt event loop.
    """
    if issubclass(exctype, asyncio.CancelledError):
        logger.debug("Suppressing asyncio.CancelledError during shutdown.")
        return

    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    traceback_details = "".join(traceback.format_exception(exctype, value, tb))
    logger.error(f"An unexpected error occurred: {value}\n--- Details ---\n{traceback_details}")


def setup_exception_hook():
    """Sets the global exception hook."""
    sys.excepthook = global_exception_hook
