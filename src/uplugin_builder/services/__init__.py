# src/uplugin_builder/services/__init__.py
from .build_launcher import BuildLauncherService, build_plugin_command
from .output_formatter import OutputColor, OutputFormatter
from .version_detector import VersionDetectorService

__all__ = [
    "BuildLauncherService",
    "OutputColor",
    "OutputFormatter",
    "VersionDetectorService",
    "build_plugin_command",
]
