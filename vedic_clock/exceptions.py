"""
Error kinds raised while reading the upstream clock
"""


class ClockScraperError(Exception):
    """Base class for all clock scraping failures."""


class SessionLaunchFailed(ClockScraperError):
    """Headless browser could not be started."""


class NavigationFailed(ClockScraperError):
    """Upstream page could not be loaded."""


class ReloadFailed(ClockScraperError):
    """Periodic full reload failed; extraction continues against the old DOM."""


class ExtractionFailed(ClockScraperError):
    """No HH:MM:SS text was found on the rendered page."""
