"""
HTTP facade for the clock scraper
"""

from .app import create_app

__all__ = ["create_app"]
