"""
Configuration for the IEX Cloud client.

Values come from the environment. The CLI loads a ``.env`` file with
python-dotenv before the client reads them. Numeric values are parsed when
read, so a malformed one never breaks ``import iexcloud``.
"""

import os


DEFAULT_BASE_URL = "https://cloud.iexapis.com/stable"


def _number(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Settings:
    """Client configuration read from the environment."""

    # Auth
    TOKEN: str = os.getenv("IEX_TOKEN", "")

    # Endpoint
    BASE_URL: str = os.getenv("IEX_BASE_URL", DEFAULT_BASE_URL)

    # HTTP
    @property
    def TIMEOUT(self) -> float:
        return _number("IEX_TIMEOUT", 30.0)

    # Seconds between requests; 0 disables throttling
    @property
    def MIN_INTERVAL(self) -> float:
        return _number("IEX_MIN_INTERVAL", 0.0)

    def reload(self) -> "Settings":
        """
        Re-read the environment, e.g. after a .env file was loaded.

        Raises:
            ValueError: If IEX_TIMEOUT or IEX_MIN_INTERVAL is not a number
        """
        self.TOKEN = os.getenv("IEX_TOKEN", "")
        self.BASE_URL = os.getenv("IEX_BASE_URL", DEFAULT_BASE_URL)
        _number("IEX_TIMEOUT", 30.0)
        _number("IEX_MIN_INTERVAL", 0.0)
        return self


settings = Settings()
