# src/forum_core/__init__.py
"""Aggregation, moderation and cascading-consistency core of a discussion forum."""

__version__ = "0.1.0"
