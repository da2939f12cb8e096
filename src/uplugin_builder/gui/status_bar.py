# src/uplugin_builder/gui/status_bar.py
from PySide6.QtWidgets import QStatusBar, QLabel
import qtawesome as qta

from uplugin_builder.core.event_bus import EventBus
from uplugin_builder.core.build_models import BuildJob, JobState
from .components import Colors, Typography


class StatusBar(QStatusBar):
    """
    An event-driven status bar showing how many packaging jobs are running
    and how the last finished one ended.
    """

    def __init__(self, event_bus: EventBus):
        super().__init__()
        self.event_bus = event_bus
        self.running_jobs = 0
        self.setObjectName("StatusBar")
        self.setStyleSheet(f"""
            #StatusBar {{
                background-color: {Colors.SECONDARY_BG.name()};
                color: {Colors.TEXT_SECONDARY.name()};
                border-top: 1px solid {Colors.BORDER_DEFAULT.name()};
                padding: 2px 8px;
            }}
            QLabel {{
                color: {Colors.TEXT_SECONDARY.name()};
                padding: 0 5px;
            }}
        """)
        self.setFont(Typography.body())

        self.jobs_icon = QLabel()
        self.jobs_label = QLabel()
        self.addPermanentWidget(self.jobs_icon)
        self.addPermanentWidget(self.jobs_label)

        self.addPermanentWidget(QLabel("|"))

        self.last_result_icon = QLabel()
        self.last_result_label = QLabel("No builds yet")
        self.addPermanentWidget(self.last_result_icon)
        self.addPermanentWidget(self.last_result_label)

        self._update_jobs_display()
        self._connect_events()

    def _connect_events(self):
        self.event_bus.subscribe("build_job_started", self.on_job_started)
        self.event_bus.subscribe("build_job_finished", self.on_job_finished)

    def on_job_started(self, job: BuildJob):
        self.running_jobs += 1
        self._update_jobs_display()

    def on_job_finished(self, job: BuildJob):
        self.running_jobs = max(0, self.running_jobs - 1)
        self._update_jobs_display()

        if job.state == JobState.SUCCEEDED:
            icon_name, color = "fa5s.check-circle", Colors.ACCENT_GREEN
        else:
            icon_name, color = "fa5s.times-circle", Colors.ACCENT_RED
        self.last_result_icon.setPixmap(qta.icon(icon_name, color=color.name()).pixmap(12, 12))
        self.last_result_label.setText(f"{job.version}: {job.state.name.lower()}")

    def _update_jobs_display(self):
        if self.running_jobs:
            color = Colors.ACCENT_BLUE
            text = f"Building: {self.running_jobs} job(s)"
        else:
            color = Colors.TEXT_SECONDARY
            text = "Idle"
        self.jobs_icon.setPixmap(qta.icon("fa5s.hammer", color=color.name()).pixmap(12, 12))
        self.jobs_label.setText(text)
