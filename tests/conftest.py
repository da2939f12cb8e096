"""Shared fixtures for the uplugin_builder test-suite."""

import sys
from pathlib import Path

import pytest

from uplugin_builder.core.build_models import BuildRequest
from uplugin_builder.core.event_bus import EventBus


class RecordingBus(EventBus):
    """An EventBus that remembers every emitted event."""

    def __init__(self):
        super().__init__()
        self.events = []

    def emit(self, event_name, *args, **kwargs):
        self.events.append((event_name, args))
        super().emit(event_name, *args, **kwargs)

    def of(self, event_name):
        return [args for name, args in self.events if name == event_name]

    def output_text(self) -> str:
        return "".join(args[0] for args in self.of("build_output_received"))


@pytest.fixture
def event_bus():
    return RecordingBus()


@pytest.fixture
def engine_root(tmp_path) -> Path:
    root = tmp_path / "Epic Games"
    root.mkdir()
    return root


@pytest.fixture
def plugin_file(tmp_path) -> Path:
    plugin = tmp_path / "plugins" / "MyPlugin.uplugin"
    plugin.parent.mkdir()
    plugin.write_text('{"FileVersion": 3}')
    return plugin


@pytest.fixture
def package_root(tmp_path) -> Path:
    return tmp_path / "packages"


@pytest.fixture
def make_request(engine_root, plugin_file, package_root):
    def _make(*versions):
        return BuildRequest(
            engine_root=str(engine_root),
            plugin_file=str(plugin_file),
            package_root=str(package_root),
            versions=tuple(versions),
        )
    return _make


@pytest.fixture
def python_script():
    """Builds a command factory that runs `source` with the current interpreter for every job."""
    def _make(source: str):
        def _factory(request, job):
            return [sys.executable, "-c", source]
        return _factory
    return _make
