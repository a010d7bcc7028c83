# src/forum_core/core/__init__.py
"""Core configuration for the forum service."""
