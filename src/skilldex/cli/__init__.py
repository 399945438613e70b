"""Command line interface for skilldex."""
