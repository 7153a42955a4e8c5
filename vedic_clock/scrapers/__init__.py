"""
Headless browser access to the upstream clock page
"""

from .browser_session import BrowserSession, ReloadOutcome

__all__ = ["BrowserSession", "ReloadOutcome"]
