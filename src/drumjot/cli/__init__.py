"""Command line interface for drumjot."""
