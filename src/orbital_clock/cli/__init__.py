"""Command line interface for orbital-clock."""
