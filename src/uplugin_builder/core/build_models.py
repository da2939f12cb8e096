# src/uplugin_builder/core/build_models.py
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from uplugin_builder.config import BUILD_LOG_FILE_NAME


class MissingInputError(ValueError):
    """Raised when a build is requested before every required path has been chosen."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Please select {', '.join(missing)}.")


class JobState(Enum):
    """
    Lifecycle of a single packaging job.
    """
    PENDING = auto()        # Output folder and log file are being prepared.
    RUNNING = auto()        # The packaging tool has been spawned.
    SUCCEEDED = auto()      # Exited normally with status 0.
    FAILED = auto()         # Non-zero status or abnormal termination.
    SKIPPED = auto()        # Output folder or log file could not be created.
    LAUNCH_FAILED = auto()  # The packaging tool could not be started.


@dataclass(frozen=True)
class BuildRequest:
    """Everything the user picked in the window when pressing Build."""
    engine_root: str
    plugin_file: str
    package_root: str
    versions: Tuple[str, ...] = ()

    def validate(self):
        missing = []
        if not self.engine_root:
            missing.append("the UE path")
        if not self.plugin_file:
            missing.append("the plugin file")
        if not self.package_root:
            missing.append("the package folder")
        if missing:
            raise MissingInputError(missing)

    @property
    def plugin_name(self) -> str:
        # Everything before the first dot, like QFileInfo.baseName().
        return Path(self.plugin_file).name.split(".", 1)[0]

    def output_dir_for(self, version: str) -> Path:
        return Path(self.package_root) / f"{self.plugin_name}_{version}"


@dataclass
class BuildJob:
    """
    One packaging run for one engine version. The job owns its log file and
    process handle exclusively; both are released when the process terminates.
    """
    job_id: int
    version: str
    plugin_file: str
    output_dir: Path
    state: JobState = JobState.PENDING
    exit_code: Optional[int] = None
    log_file: Optional[BinaryIO] = field(default=None, repr=False)
    process: Optional[asyncio.subprocess.Process] = field(default=None, repr=False)

    @property
    def log_path(self) -> Path:
        return self.output_dir / BUILD_LOG_FILE_NAME

    @property
    def is_finished(self) -> bool:
        return self.state not in (JobState.PENDING, JobState.RUNNING)

    def write_log(self, data: bytes):
        if self.log_file and not self.log_file.closed:
            self.log_file.write(data)

    def close_log(self):
        if self.log_file and not self.log_file.closed:
            self.log_file.close()

    def release(self):
        """Closes the log file and drops the process handle."""
        self.close_log()
        self.log_file = None
        self.process = None
