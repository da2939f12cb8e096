"""Tests for keyword-based coloring of build output."""

import pytest

from uplugin_builder.services.output_formatter import OutputColor, OutputFormatter


@pytest.fixture
def formatter():
    return OutputFormatter()


@pytest.mark.parametrize("text, expected", [
    ("Error: failed to compile", OutputColor.RED),
    ("warning: deprecated", OutputColor.AMBER),
    ("BUILD SUCCESSFUL", OutputColor.GREEN),
    ("plain text", OutputColor.DEFAULT),
])
def test_documented_examples(formatter, text, expected):
    assert formatter.classify(text) == expected


def test_error_is_case_sensitive(formatter):
    assert formatter.classify("Module.cpp(12): error C2065") == OutputColor.RED
    assert formatter.classify("ERROR LEVEL 0") == OutputColor.DEFAULT


def test_failed_is_case_insensitive(formatter):
    assert formatter.classify("AutomationTool exiting: FAILED") == OutputColor.RED
    assert formatter.classify("Build process Failed for version: UE_5.3") == OutputColor.RED


def test_red_wins_over_warning_and_success(formatter):
    assert formatter.classify("warning: 1 error, build completed") == OutputColor.RED


def test_warning_wins_over_success(formatter):
    assert formatter.classify("completed with warning") == OutputColor.AMBER
    assert formatter.classify("Warning: capitalised") == OutputColor.DEFAULT


def test_success_keywords_are_case_sensitive(formatter):
    assert formatter.classify("Build process completed for version: UE_5.3") == OutputColor.GREEN
    assert formatter.classify("successful") == OutputColor.DEFAULT
    assert formatter.classify("Completed") == OutputColor.DEFAULT
