"""
Vedic Clock Scraper API - serve the time shown on vedicstandardtime.com
"""

__version__ = "1.0.0"
