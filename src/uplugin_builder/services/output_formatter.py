# src/uplugin_builder/services/output_formatter.py
from enum import Enum


class OutputColor(Enum):
    """Display color tags for build output. The GUI maps them onto its palette."""
    DEFAULT = "default"
    RED = "red"
    AMBER = "amber"
    GREEN = "green"


class OutputFormatter:
    """Picks a display color for a chunk of build output based on its keywords."""

    def classify(self, text: str) -> OutputColor:
        is_error = "error" in text
        is_failed = "failed" in text.lower()
        if is_error or is_failed:
            return OutputColor.RED
        if "warning" in text:
            return OutputColor.AMBER
        if "SUCCESSFUL" in text or "completed" in text:
            return OutputColor.GREEN
        return OutputColor.DEFAULT
