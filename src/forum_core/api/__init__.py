"""HTTP API for the forum core."""
