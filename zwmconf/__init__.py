"""Geometry, bindings, config-line parsing, command launching and status sockets for a window manager."""

__version__ = "0.16.0"

__all__ = [
    "binding",
    "geometry",
    "messaging",
    "parsing",
    "process",
    "timer",
]