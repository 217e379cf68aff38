"""Configuration management for the matty.lol API proxies."""
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_PATH = PROJECT_ROOT / "config.yaml"

DEFAULT_WALLET = "9NuiHh5wgRPx69BFGP1ZR8kHiBENGoJrXs5GpZzKAyn8"


def _env(name: str) -> str:
    """Read an environment variable, treating blanks as unset."""
    return (os.getenv(name) or "").strip()


def _env_float(name: str) -> Optional[float]:
    raw = _env(name)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    # nan and inf parse fine but are not coordinates
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return value


class Config:
    """Configuration singleton for the application."""

    _instance = None
    _config: dict = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if CONFIG_PATH.exists():
            with open(CONFIG_PATH, "r") as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation."""
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    @property
    def jupiter_api_key(self) -> str:
        return _env("JUP_PORTFOLIO_API_KEY")

    @property
    def wallet_address(self) -> str:
        return _env("JUP_WALLET_ADDRESS") or self.get("jupiter.wallet_address", DEFAULT_WALLET)

    @property
    def github_owner(self) -> str:
        return _env("GITHUB_OWNER")

    @property
    def github_repo(self) -> str:
        return _env("GITHUB_REPO")

    @property
    def reddit_username(self) -> str:
        return _env("REDDIT_USERNAME")

    @property
    def weather_lat(self) -> Optional[float]:
        return _env_float("WEATHER_LAT")

    @property
    def weather_lon(self) -> Optional[float]:
        return _env_float("WEATHER_LON")

    @property
    def weather_place(self) -> str:
        return self.get("weather.place", "Rossendale, Lancashire")

    @property
    def user_agent(self) -> str:
        return self.get("upstream.user_agent", "matty.lol")

    @property
    def upstream_timeout(self) -> Optional[float]:
        return self.get("upstream.timeout")

    @property
    def log_level(self) -> str:
        # loguru level names are upper case
        return str(_env("LOG_LEVEL") or self.get("logging.level", "INFO")).upper()

    @property
    def log_dir(self) -> Optional[Path]:
        raw = _env("LOG_DIR") or self.get("logging.dir")
        return Path(raw) if raw else None


config = Config()
