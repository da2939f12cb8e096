# src/uplugin_builder/core/application.py
import logging

from uplugin_builder.core.build_models import BuildRequest, MissingInputError
from uplugin_builder.core.event_bus import EventBus
from uplugin_builder.gui.main_window import MainWindow
from uplugin_builder.services import BuildLauncherService, VersionDetectorService

logger = logging.getLogger(__name__)


class Application:
    """
    Creates the services and the main window and routes events between them.
    """

    def __init__(self):
        logger.info("Initializing application...")
        self.event_bus = EventBus()
        self.version_detector = VersionDetectorService()
        self.build_launcher = BuildLauncherService(self.event_bus)
        self.main_window = MainWindow(self.event_bus)
        self._connect_events()

    def _connect_events(self):
        """Set up event connections between components."""
        self.event_bus.subscribe("engine_root_selected", self.handle_engine_root_selected)
        self.event_bus.subscribe("build_requested", self.handle_build_requested)
        self.event_bus.subscribe("application_shutdown", self.shutdown)

    def handle_engine_root_selected(self, engine_root: str):
        versions = list(self.version_detector.detect(engine_root))
        self.event_bus.emit("engine_versions_detected", versions)

    async def handle_build_requested(self, request: BuildRequest):
        self.event_bus.emit("build_launch_started")
        try:
            await self.build_launcher.launch(request)
        except MissingInputError as e:
            logger.info(f"Build request rejected: {e}")
            self.event_bus.emit("build_request_rejected", str(e))
        finally:
            self.event_bus.emit("build_launch_ended")

    def show(self):
        self.main_window.show()

    def shutdown(self):
        running = list(self.build_launcher.active_jobs.values())
        if running:
            # Jobs are never cancelled; the packaging tool keeps running on its own.
            logger.warning(
                f"Exiting with {len(running)} build(s) still running: "
                f"{', '.join(job.version for job in running)}"
            )
        logger.info("Application shut down.")
