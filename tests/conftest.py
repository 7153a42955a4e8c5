"""conftest.py - in-memory stand-ins for Playwright so tests never start a browser."""
import pytest

from vedic_clock.config import DEFAULTS, _merge
from vedic_clock.scrapers.browser_session import BrowserSession


def make_page_text(nodes, body=None):
    """Payload shaped like the in-page text script result."""
    return {'textNodes': list(nodes), 'bodyText': '\n'.join(nodes) if body is None else body}


class FakePage:
    def __init__(self, payloads=None):
        self.payloads = list(payloads or [])
        self.goto_calls = []
        self.goto_error = None
        self.evaluate_calls = 0
        self.closed = False

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({'url': url, 'wait_until': wait_until, 'timeout': timeout})
        if self.goto_error is not None:
            raise self.goto_error

    async def evaluate(self, script):
        self.evaluate_calls += 1
        if len(self.payloads) > 1:
            return self.payloads.pop(0)
        return self.payloads[0] if self.payloads else make_page_text([])

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.new_page_kwargs = []
        self.closed = False

    async def new_page(self, **kwargs):
        self.new_page_kwargs.append(kwargs)
        return self.page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser):
        self.browser = browser
        self.launch_calls = []
        self.launch_error = None

    async def launch(self, **kwargs):
        self.launch_calls.append(kwargs)
        if self.launch_error is not None:
            raise self.launch_error
        return self.browser


class FakePlaywright:
    def __init__(self, chromium):
        self.chromium = chromium
        self.stopped = False

    async def stop(self):
        self.stopped = True


class FakePlaywrightFactory:
    """Replacement for async_playwright: factory().start() -> FakePlaywright."""

    def __init__(self, page):
        self.page = page
        self.browser = FakeBrowser(page)
        self.chromium = FakeChromium(self.browser)
        self.playwright = FakePlaywright(self.chromium)

    def __call__(self):
        return self

    async def start(self):
        return self.playwright


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def config():
    return _merge(DEFAULTS, {})


@pytest.fixture
def fake_page():
    return FakePage([make_page_text(['Vedic Standard Time', '08:15:42', 'Ujjain, MP'])])


@pytest.fixture
def playwright_factory(fake_page):
    return FakePlaywrightFactory(fake_page)


@pytest.fixture
def session(config, playwright_factory):
    return BrowserSession(config, playwright_factory=playwright_factory)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def page_text():
    """Builder for in-page text script payloads."""
    return make_page_text
