"""Timestamps for log messages."""

import time


def gettime() -> str:
    """Return the current local time as HH:MM:SS."""
    return time.strftime("%H:%M:%S", time.localtime())