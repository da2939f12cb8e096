"""Packages Unreal Engine plugins against several installed engine versions."""

__version__ = "1.0.0"
