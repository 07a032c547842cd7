"""Orbital clock: Earth's place on its orbit as twinkling ASCII art."""

__version__ = "0.1.0"
