import logging
import time

from selenium.webdriver.common.by import By

from .. import config

logger = logging.getLogger(__name__)

PREV_DAY_SELECTOR = '[data-day-picker-arrow="prev"]'


def _is_disabled(element) -> bool:
    classes = (element.get_attribute("class") or "").split()
    return (
        element.get_attribute("disabled") is not None
        or "disabled" in classes
        or element.get_attribute("aria-hidden") == "true"
    )


class DayNavigator:
    """Steps the feed's day picker one day into the past."""

    def __init__(
        self,
        session,
        settle: float = config.NAVIGATION_SETTLE_SECONDS,
        scroll_settle: float = config.SCROLL_SETTLE_SECONDS,
    ):
        self.session = session
        self.settle = settle
        self.scroll_settle = scroll_settle

    def step_backward(self) -> bool:
        """
        Click the previous-day arrow.

        Returns False, without raising, when the arrow is missing, disabled or
        hidden, or when the click itself fails: the feed has no earlier day to
        offer. On success the page is given ``settle`` seconds before it is read.
        """
        try:
            self.session.close_popups()
            driver = self.session.driver
            buttons = driver.find_elements(By.CSS_SELECTOR, PREV_DAY_SELECTOR)
            if not buttons:
                logger.warning("Previous-day button not found")
                return False
            button = buttons[0]
            if _is_disabled(button):
                logger.warning("Previous-day button is disabled")
                return False

            driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", button)
            if self.scroll_settle:
                time.sleep(self.scroll_settle)
            button.click()
        except Exception as e:
            # Includes a dead driver connection, not only WebDriverException
            logger.warning("Could not go to previous day: %s", e)
            return False

        if self.settle:
            time.sleep(self.settle)
        return True
