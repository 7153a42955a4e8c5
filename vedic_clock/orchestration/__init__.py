"""
Snapshot caching over the browser session
"""

from .clock_service import ClockService

__all__ = ["ClockService"]
