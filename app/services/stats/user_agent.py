"""User agent classification - coarse browser and device labels."""

from app.models.stats import Browser, ClientInfo, Device

# First match wins; Chrome user agents also mention Safari, IE ones may mention Opera.
_BROWSER_RULES: list[tuple[Browser, str, str | None]] = [
    (Browser.INTERNET_EXPLORER, "msie", "opera"),
    (Browser.FIREFOX, "firefox", None),
    (Browser.CHROME, "chrome", None),
    (Browser.SAFARI, "safari", None),
    (Browser.OPERA, "opera", None),
]


def detect_device(user_agent: str) -> Device:
    ua = (user_agent or "").lower()
    if "mobile" in ua:
        return Device.MOBILE
    if "tablet" in ua:
        return Device.TABLET
    return Device.DESKTOP


def detect_browser(user_agent: str) -> Browser:
    ua = (user_agent or "").lower()
    for browser, needle, excluded in _BROWSER_RULES:
        if needle in ua and (excluded is None or excluded not in ua):
            return browser
    return Browser.OTHER


def classify(user_agent: str) -> ClientInfo:
    """Classify a raw user agent string into (browser, device)."""
    return ClientInfo(browser=detect_browser(user_agent), device=detect_device(user_agent))
