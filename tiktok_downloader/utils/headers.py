from typing import Dict, Optional
from urllib.parse import urlparse

from tiktok_downloader.config.settings import config

# Upstream hosts reject default client identifiers
UA_CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)

LANG_US = "en-US,en;q=0.9"


def browser_headers(url: Optional[str] = None) -> Dict[str, str]:
    """Headers mimicking a desktop browser, with a Referer when a URL is given"""
    headers = {
        "User-Agent": config.api.user_agent or UA_CHROME,
        "Accept": "*/*",
        "Accept-Language": LANG_US,
        "Accept-Encoding": "identity",
    }
    if url:
        parsed = urlparse(url)
        if parsed.scheme and parsed.netloc:
            headers["Referer"] = f"{parsed.scheme}://{parsed.netloc}/"
    return headers
