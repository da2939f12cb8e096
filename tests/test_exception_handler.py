"""Tests for the global exception hook."""

import asyncio
import logging
import sys

from uplugin_builder.utils.exception_handler import global_exception_hook, setup_exception_hook


def test_uncaught_exception_is_logged(caplog):
    try:
        raise RuntimeError("packaging window exploded")
    except RuntimeError:
        exctype, value, tb = sys.exc_info()

    with caplog.at_level(logging.ERROR):
        global_exception_hook(exctype, value, tb)

    assert "packaging window exploded" in caplog.text
    assert "RuntimeError" in caplog.text


def test_cancelled_error_is_suppressed(caplog):
    with caplog.at_level(logging.ERROR):
        global_exception_hook(asyncio.CancelledError, asyncio.CancelledError(), None)

    assert caplog.text == ""


def test_setup_installs_hook(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    setup_exception_hook()
    assert sys.excepthook is global_exception_hook
