import asyncio
import logging
import sys

import qasync
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import QTimer

from uplugin_builder.config import APP_NAME, ORGANIZATION_NAME, configure_logging
from uplugin_builder.core.application import Application
from uplugin_builder.utils.exception_handler import setup_exception_hook

logger = logging.getLogger(__name__)


async def main_async_logic(app_instance: QApplication):
    """
    The main asynchronous coroutine for the application. Runs until the Qt
    application is about to quit.
    """
    shutdown_future = asyncio.get_running_loop().create_future()

    def on_about_to_quit():
        if not shutdown_future.done():
            shutdown_future.set_result(True)

    app_instance.aboutToQuit.connect(on_about_to_quit)

    try:
        builder_app = Application()
        builder_app.show()
        logger.info("Application ready and displayed.")
        await shutdown_future
    except Exception as e:
        logger.exception("CRITICAL ERROR during application startup")
        QMessageBox.critical(None, "Startup Error", f"Failed to start {APP_NAME}.\n\nError: {e}")
    finally:
        logger.info("Main async logic has finished. Exiting.")
        QTimer.singleShot(100, app_instance.quit)


def main():
    configure_logging()
    setup_exception_hook()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)

    qasync.run(main_async_logic(app))
    logger.info("Application has exited cleanly.")


if __name__ == "__main__":
    main()
