"""
Thin wrapper around requests.Session used by the API client.
"""

import logging
import time
from typing import Dict, Optional

import requests

from iexcloud import __version__

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": f"iexcloud-python/{__version__}",
    "Accept": "application/json",
}


class RequestSession:
    """
    requests.Session with default headers, a timeout and optional throttling.

    ``get`` returns the ``requests.Response`` as-is; it is falsy for
    4xx/5xx statuses. Transport errors propagate as ``requests`` exceptions.
    """

    def __init__(self, timeout: float = 30, min_interval: float = 0,
                 headers: Optional[Dict[str, str]] = None):
        self.timeout = timeout
        self.min_interval = min_interval
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        if headers:
            self.session.headers.update(headers)
        self.last_call_time = 0.0

    def _rate_limit(self):
        """Sleep until min_interval has passed since the previous call."""
        if not self.min_interval:
            return
        elapsed = time.monotonic() - self.last_call_time
        if elapsed < self.min_interval:
            sleep_time = self.min_interval - elapsed
            logger.debug(f"Rate limiting: sleeping {sleep_time:.2f}s")
            time.sleep(sleep_time)
        self.last_call_time = time.monotonic()

    def get(self, url: str, params: Optional[Dict] = None) -> requests.Response:
        self._rate_limit()
        return self.session.get(url, params=params, timeout=self.timeout)

    def close(self):
        self.session.close()
