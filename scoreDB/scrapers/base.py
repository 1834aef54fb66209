"""
Browser session for the results feed.

FeedSession owns the selenium driver for one run: launch, configure, load the
feed, dismiss overlays, read the day label, snapshot the page, and quit.
Use it as a context manager so the browser is always released.
"""
import logging
import time
from typing import Callable, Optional

from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .. import config
from .snapshot import SoupDaySnapshot

logger = logging.getLogger(__name__)

READY_SELECTOR = ".sportName.badminton"
DAY_LABEL_SELECTOR = '[data-testid="wcl-dayPickerButton"]'
POPUP_CLOSE_SELECTORS = [
    'button[aria-label="Close"]',
    ".cookie-consent-close",
    ".modal-close",
    '[class*="close"]',
    '[class*="dismiss"]',
]


class SessionSetupError(RuntimeError):
    """The browser could not be started or the feed never became ready."""


def build_chrome_options(headless: bool = True) -> webdriver.ChromeOptions:
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-setuid-sandbox")
    options.add_argument("--disable-blink-features=AutomationControlled")
    width, height = config.WINDOW_SIZE
    options.add_argument(f"--window-size={width},{height}")
    options.add_argument(f"--user-agent={config.USER_AGENT}")
    if config.BLOCK_IMAGES:
        options.add_experimental_option(
            "prefs", {"profile.managed_default_content_settings.images": 2}
        )
    return options


def _launch_chrome(headless: bool) -> webdriver.Chrome:
    return webdriver.Chrome(options=build_chrome_options(headless))


class FeedSession:
    """Explicitly scoped handle on the browser page showing the feed."""

    def __init__(
        self,
        url: str = config.FEED_URL,
        headless: bool = config.HEADLESS,
        driver_factory: Optional[Callable[[bool], webdriver.Remote]] = None,
        popup_settle: float = config.POPUP_SETTLE_SECONDS,
        close_settle: float = config.CLOSE_SETTLE_SECONDS,
        page_load_timeout: float = config.PAGE_LOAD_TIMEOUT_SECONDS,
        ready_timeout: float = config.READY_TIMEOUT_SECONDS,
    ):
        self.url = url
        self.headless = headless
        self.driver_factory = driver_factory or _launch_chrome
        self.popup_settle = popup_settle
        self.close_settle = close_settle
        self.page_load_timeout = page_load_timeout
        self.ready_timeout = ready_timeout
        self._driver = None

    @property
    def driver(self):
        if self._driver is None:
            raise RuntimeError("Feed session is not open")
        return self._driver

    def open(self) -> None:
        """Launch the browser, block ads/trackers, load the feed, and clear overlays."""
        logger.info("Opening feed %s", self.url)
        try:
            self._driver = self.driver_factory(self.headless)
            self._configure()
            self._driver.get(self.url)
            WebDriverWait(self._driver, self.ready_timeout).until(
                EC.presence_of_element_located((By.CSS_SELECTOR, READY_SELECTOR))
            )
        except (TimeoutException, WebDriverException) as e:
            self.close()
            raise SessionSetupError(f"Could not load feed {self.url}: {e}") from e
        except BaseException:
            # __exit__ never runs when __enter__ raises
            self.close()
            raise
        logger.info("Feed loaded")
        self.close_popups()

    def _configure(self) -> None:
        self._driver.set_page_load_timeout(self.page_load_timeout)
        # CDP is Chromium-only; other drivers simply load everything
        if hasattr(self._driver, "execute_cdp_cmd"):
            self._driver.execute_cdp_cmd("Network.enable", {})
            self._driver.execute_cdp_cmd(
                "Network.setBlockedURLs", {"urls": list(config.BLOCKED_URL_PATTERNS)}
            )

    def close_popups(self) -> None:
        """Best-effort click on anything that looks like an overlay close button."""
        for selector in POPUP_CLOSE_SELECTORS:
            try:
                elements = self.driver.find_elements(By.CSS_SELECTOR, selector)
            except WebDriverException as e:
                logger.debug("Popup lookup failed for %s: %s", selector, e)
                continue
            for element in elements:
                try:
                    element.click()
                except WebDriverException:
                    # Hidden or stale elements are expected here
                    continue
                logger.debug("Closed popup via %s", selector)
                if self.popup_settle:
                    time.sleep(self.popup_settle)

    def current_day_label(self) -> str:
        """The feed's own text for the day currently shown (e.g. "12. Jan")."""
        elements = self.driver.find_elements(By.CSS_SELECTOR, DAY_LABEL_SELECTOR)
        return elements[0].text.strip() if elements else ""

    def snapshot(self) -> SoupDaySnapshot:
        return SoupDaySnapshot(self.driver.page_source)

    def close(self) -> None:
        if self._driver is None:
            return
        try:
            self._driver.quit()
        except WebDriverException as e:
            logger.warning("Browser did not quit cleanly: %s", e)
        finally:
            self._driver = None
            logger.info("Browser closed")

    def __enter__(self) -> "FeedSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self.close_settle:
                time.sleep(self.close_settle)
        finally:
            self.close()
