"""Check many websites at once."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable

WebsiteChecker = Callable[[str], bool]

_MAX_WORKERS = 64


def check_websites(checker: WebsiteChecker, urls: Iterable[str]) -> Dict[str, bool]:
    """Run ``checker`` on every URL concurrently and map each URL to its result."""
    url_list = list(urls)
    if not url_list:
        return {}
    workers = min(len(url_list), _MAX_WORKERS)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(checker, url_list))
    return dict(zip(url_list, results))