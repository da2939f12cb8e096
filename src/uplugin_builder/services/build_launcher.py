# src/uplugin_builder/services/build_launcher.py
import asyncio
import codecs
import itertools
import logging
import subprocess
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from uplugin_builder.config import BUILD_PLUGIN_COMMAND, READ_CHUNK_SIZE, RUN_UAT_DIR, RUN_UAT_SCRIPT
from uplugin_builder.core.build_models import BuildJob, BuildRequest, JobState
from uplugin_builder.core.event_bus import EventBus
from uplugin_builder.services.output_formatter import OutputFormatter

logger = logging.getLogger(__name__)

CommandFactory = Callable[[BuildRequest, BuildJob], Sequence[str]]


def build_plugin_command(request: BuildRequest, job: BuildJob) -> List[str]:
    """The RunUAT invocation that packages the plugin for one engine version."""
    run_uat = Path(request.engine_root) / job.version / RUN_UAT_DIR / RUN_UAT_SCRIPT
    return [
        str(run_uat),
        BUILD_PLUGIN_COMMAND,
        f"-plugin={request.plugin_file}",
        f"-package={job.output_dir}",
    ]


class BuildLauncherService:
    """
    Fans a build request out into one packaging process per selected engine version.

    Progress is reported only through the event bus, so the service has no
    knowledge of the window showing it:
      - build_output_received(text, color)
      - build_job_started(job)
      - build_job_finished(job)
      - build_batch_launched(jobs)
    """

    def __init__(self, event_bus: EventBus, command_factory: Optional[CommandFactory] = None):
        self.event_bus = event_bus
        self.command_factory = command_factory or build_plugin_command
        self.formatter = OutputFormatter()
        self.active_jobs: Dict[int, BuildJob] = {}
        self._job_ids = itertools.count(1)
        self._job_tasks: set[asyncio.Task] = set()

    def report(self, text: str):
        """Sends a chunk of text to the build console with its display color."""
        self.event_bus.emit("build_output_received", text, self.formatter.classify(text))

    async def launch(self, request: BuildRequest) -> List[BuildJob]:
        """
        Starts one packaging process per selected version and returns as soon as
        all of them have been spawned. Raises MissingInputError for an incomplete request.
        """
        request.validate()

        jobs = []
        for version in request.versions:
            job = BuildJob(
                job_id=next(self._job_ids),
                version=version,
                plugin_file=request.plugin_file,
                output_dir=request.output_dir_for(version),
            )
            jobs.append(job)
            if self._prepare_job(job):
                await self._start_job(request, job)

        if jobs:
            self.report("Build process started for all selected versions.\n")
        else:
            self.report("No version was selected.\n")

        self.event_bus.emit("build_batch_launched", jobs)
        return jobs

    async def wait_for_all(self):
        """Waits until every job launched so far has terminated."""
        while self._job_tasks:
            await asyncio.gather(*list(self._job_tasks), return_exceptions=True)

    def _prepare_job(self, job: BuildJob) -> bool:
        try:
            job.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create {job.output_dir}: {e}")
            job.state = JobState.SKIPPED
            self.report(f"Failed to create output folder for version: {job.version} ({e.strerror or e})\n")
            return False

        try:
            job.log_file = open(job.log_path, "wb")
        except OSError as e:
            logger.error(f"Could not open {job.log_path}: {e}")
            job.state = JobState.SKIPPED
            self.report(f"Failed to create log file for version: {job.version}\n")
            return False

        return True

    async def _start_job(self, request: BuildRequest, job: BuildJob):
        command = list(self.command_factory(request, job))
        logger.info(f"Starting build for {job.version}: {command}")

        try:
            job.process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                creationflags=subprocess.CREATE_NO_WINDOW if sys.platform == "win32" else 0
            )
        except OSError as e:
            logger.error(f"Could not start build for {job.version}: {e}")
            job.state = JobState.LAUNCH_FAILED
            job.release()
            self.report(f"Failed to start the build process for version: {job.version} ({e.strerror or e})\n")
            return

        job.state = JobState.RUNNING
        self.active_jobs[job.job_id] = job
        self.event_bus.emit("build_job_started", job)

        task = asyncio.create_task(self._run_job(job))
        self._job_tasks.add(task)
        task.add_done_callback(self._job_tasks.discard)

    async def _run_job(self, job: BuildJob):
        process = job.process
        try:
            results = await asyncio.gather(
                self._pump_stream(job, process.stdout),
                self._pump_stream(job, process.stderr),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, Exception):
                    logger.error(f"Lost output of the build for {job.version}: {result!r}")
            job.exit_code = await process.wait()
        finally:
            job.release()
            self.active_jobs.pop(job.job_id, None)

        # A negative return code means the process was killed by a signal.
        if job.exit_code == 0:
            job.state = JobState.SUCCEEDED
            logger.info(f"Build for {job.version} completed")
            self.report(f"Build process completed for version: {job.version}\n")
        else:
            job.state = JobState.FAILED
            logger.warning(f"Build for {job.version} failed with exit code {job.exit_code}")
            self.report(f"Build process failed for version: {job.version} (exit code {job.exit_code})\n")

        self.event_bus.emit("build_job_finished", job)

    async def _pump_stream(self, job: BuildJob, stream: asyncio.StreamReader):
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            self._write_log(job, chunk)
            text = decoder.decode(chunk)
            if text:
                self.report(text)

        tail = decoder.decode(b"", final=True)
        if tail:
            self.report(tail)

    def _write_log(self, job: BuildJob, chunk: bytes):
        # Output keeps streaming to the console after the log file gives out.
        try:
            job.write_log(chunk)
        except OSError as e:
            logger.error(f"Could not write {job.log_path}: {e}")
            try:
                job.close_log()
            except OSError as close_error:
                logger.warning(f"Could not close {job.log_path}: {close_error}")
            job.log_file = None
            self.report(f"Failed to write build log for version: {job.version} ({e.strerror or e})\n")
