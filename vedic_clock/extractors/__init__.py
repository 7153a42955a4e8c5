"""
Text extraction from the rendered clock page
"""

from .clock_extractor import extract_clock, find_clock_text, find_location, parse_page_text

__all__ = ["extract_clock", "find_clock_text", "find_location", "parse_page_text"]
