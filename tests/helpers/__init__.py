"""Test helpers for orbital-clock."""
