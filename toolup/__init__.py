"""Toolchain installer building blocks: downloads, progress display, terminal output, prompts and errors."""

__version__ = "0.1.0"