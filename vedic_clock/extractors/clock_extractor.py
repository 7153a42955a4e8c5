"""
Extract the displayed clock time and location from the rendered upstream page.

The patterns describe how the upstream page renders today; they are expected
to break if its markup changes.
"""

import re
from typing import Any, Iterable, Optional

from loguru import logger

from ..models.snapshot import ClockReading, MAX_LOCATION_LENGTH

# Collects every text node under <body> in tree-walker (depth-first, document)
# order, plus the rendered body text used for the location line.
PAGE_TEXT_SCRIPT = """
() => {
    if (!document.body) {
        return { textNodes: [], bodyText: '' };
    }
    const textNodes = [];
    const walker = document.createTreeWalker(document.body, NodeFilter.SHOW_TEXT);
    while (walker.nextNode()) {
        textNodes.push(walker.currentNode.textContent || '');
    }
    return { textNodes: textNodes, bodyText: document.body.innerText || '' };
}
"""

CLOCK_RE = re.compile(r'[0-9]{2}:[0-9]{2}:[0-9]{2}')
LOCATION_RE = re.compile(r'[A-Za-z .()-]+,\s*[A-Z ]{3,}')
# JS String.trim() also removes the byte-order mark
TRIM_RE = re.compile(r'^[\s\ufeff]+|[\s\ufeff]+$')


def find_clock_text(text_nodes: Iterable[str]) -> Optional[str]:
    """Return the first trimmed text node that is exactly HH:MM:SS."""
    for node in text_nodes:
        text = TRIM_RE.sub('', node or '')
        if CLOCK_RE.fullmatch(text):
            return text
    return None


def find_location(body_text: str) -> Optional[str]:
    """Return the first "City, STATE" style line of the rendered text."""
    for line in (body_text or '').split('\n'):
        line = TRIM_RE.sub('', line)
        if not line:
            continue
        if len(line) <= MAX_LOCATION_LENGTH and LOCATION_RE.fullmatch(line):
            return line
    return None


def parse_page_text(payload: Any) -> ClockReading:
    """Turn the in-page script result into a ClockReading."""
    if not isinstance(payload, dict):
        logger.warning(f"Unexpected page text payload: {type(payload).__name__}")
        return ClockReading()

    return ClockReading(
        time_text=find_clock_text(payload.get('textNodes') or []),
        location=find_location(payload.get('bodyText') or '')
    )


async def extract_clock(session) -> ClockReading:
    """
    Read time and location from the page currently loaded in the session.

    Args:
        session: BrowserSession (or anything with an async evaluate(script))

    Returns:
        ClockReading; time_text is None when no clock text was found
    """
    payload = await session.evaluate(PAGE_TEXT_SCRIPT)
    return parse_page_text(payload)
