"""
Browser Session - one long-lived Playwright page pointed at the upstream clock
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import async_playwright, Browser, Page

from ..exceptions import NavigationFailed, ReloadFailed, SessionLaunchFailed

UPSTREAM_URL = 'https://www.vedicstandardtime.com/'
DESKTOP_USER_AGENT = 'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome Safari'


@dataclass
class ReloadOutcome:
    """Result of a best-effort page reload."""

    ok: bool
    error: Optional[ReloadFailed] = None


class BrowserSession:
    """Own a single headless browser and page for the process lifetime."""

    def __init__(self, config: Dict[str, Any], playwright_factory=async_playwright):
        """
        Initialize browser session.

        Args:
            config: Configuration dictionary (reads the 'browser' section)
            playwright_factory: Callable returning a Playwright context manager
        """
        browser_config = config.get('browser', {})
        self.url = browser_config.get('url', UPSTREAM_URL)
        self.headless = browser_config.get('headless', True)
        self.launch_args = list(browser_config.get('args', ['--no-sandbox', '--disable-setuid-sandbox']))
        self.user_agent = browser_config.get('user_agent', DESKTOP_USER_AGENT)
        self.wait_until = browser_config.get('wait_until', 'domcontentloaded')
        self.timeout = browser_config.get('timeout', 60) * 1000  # Convert to milliseconds

        self._playwright_factory = playwright_factory
        self._playwright = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    @property
    def is_open(self) -> bool:
        return self._page is not None

    async def ensure_session(self) -> bool:
        """
        Launch the browser and open the upstream page if not already done.

        Returns:
            True if the session was created by this call, False if it already existed

        Raises:
            SessionLaunchFailed: browser could not be started
            NavigationFailed: upstream page could not be loaded
        """
        if self._page is not None:
            return False

        try:
            self._playwright = await self._playwright_factory().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=self.launch_args
            )
            self._page = await self._browser.new_page(user_agent=self.user_agent)
        except Exception as e:
            logger.error(f"Browser launch failed: {e}")
            await self.close()
            raise SessionLaunchFailed(f"Could not launch headless browser: {e}") from e

        logger.info(f"Browser launched, opening {self.url}")
        try:
            await self._navigate()
        except Exception as e:
            logger.error(f"Initial navigation to {self.url} failed: {e}")
            await self.close()
            raise NavigationFailed(f"Could not load {self.url}: {e}") from e

        return True

    async def _navigate(self) -> None:
        await self._page.goto(self.url, wait_until=self.wait_until, timeout=self.timeout)

    async def reload(self) -> ReloadOutcome:
        """Navigate to the upstream URL again, reporting failure instead of raising."""
        if self._page is None:
            return ReloadOutcome(ok=False, error=ReloadFailed("No browser session to reload"))
        try:
            await self._navigate()
        except Exception as e:
            return ReloadOutcome(ok=False, error=ReloadFailed(f"Reload of {self.url} failed: {e}"))
        logger.info(f"Reloaded {self.url}")
        return ReloadOutcome(ok=True)

    async def evaluate(self, script: str) -> Any:
        """Run a script in the page context."""
        if self._page is None:
            raise NavigationFailed("Browser session is not open")
        return await self._page.evaluate(script)

    async def close(self) -> None:
        """Close page, browser and Playwright driver."""
        if self._page:
            try:
                await self._page.close()
            except Exception as e:
                logger.debug(f"Could not close page: {e}")
            self._page = None

        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.debug(f"Could not close browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.debug(f"Could not stop Playwright: {e}")
            self._playwright = None
