"""Declarative widgets that build render-object trees, with event handling, scrolling and clipping helpers."""

__version__ = "0.1.0"