"""Keyboard-driven clipboard history picker backed by GPaste, with a Tk window."""

__version__ = "0.1.0"