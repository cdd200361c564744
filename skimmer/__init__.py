"""Query editing, themes, options, layout and preview parsing, status line and text helpers for a fuzzy finder."""

__version__ = "0.1.0"