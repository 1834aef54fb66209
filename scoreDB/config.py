import os

# Base paths
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
DB_PATH = os.getenv("SCORES_DB_PATH", os.path.join(REPO_ROOT, 'badminton_scores.db'))


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# --- Feed ---
FEED_URL = os.getenv("SCORES_FEED_URL", "https://www.flashscore.com/badminton/")
HEADLESS = _env_flag("SCORES_HEADLESS", True)

# Days walked backward from yesterday on each run
LOOKBACK_DAYS = 7

# --- Scoring ---
WIN_POINTS = 100

# Ledger labels are written once after all reconciliation unless this is set
LEDGER_COMMIT_PER_DAY = _env_flag("SCORES_LEDGER_PER_DAY", False)

# --- Settle delays (seconds) ---
# Minimum wait after a state-changing browser action before the page is read again.
NAVIGATION_SETTLE_SECONDS = 2.0
SCROLL_SETTLE_SECONDS = 0.5
POPUP_SETTLE_SECONDS = 0.5
DAY_PAUSE_SECONDS = 1.0
# Lets in-flight requests drain before the browser is torn down
CLOSE_SETTLE_SECONDS = 3.0

# --- Timeouts (seconds) ---
PAGE_LOAD_TIMEOUT_SECONDS = 30
READY_TIMEOUT_SECONDS = 10

# --- Browser ---
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
WINDOW_SIZE = (1200, 800)

# URL patterns dropped by the browser before they are requested
BLOCKED_URL_PATTERNS = [
    "*doubleclick.net*",
    "*googleadservices.com*",
    "*googlesyndication.com*",
    "*adnxs.com*",
    "*advertising.com*",
    "*/ads/*",
    "*analytics*",
]
BLOCK_IMAGES = True
