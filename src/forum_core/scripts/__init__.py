"""Operational scripts for the forum core."""
