from __future__ import annotations

"""Configuration loader for the WooCommerce connection.

Values come from three layers, later layers winning: built-in defaults, an
optional YAML file (`config/settings.yaml`, or the path in
``WOOCOMMERCE_CONFIG_PATH``) holding a ``woocommerce:`` mapping, and the
``WOOCOMMERCE_*`` environment variables. The YAML file is read once and cached;
the environment is read every time settings are resolved.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import copy
import os

import yaml
from dotenv import find_dotenv, load_dotenv


DEFAULT_BASE_URL = "https://www.12taste.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONFIG_PATH = "config/settings.yaml"

# settings field -> environment variable
_ENV_VARS = {
    "base_url": "WOOCOMMERCE_API_BASE_URL",
    "api_key": "WOOCOMMERCE_API_KEY",
    "api_secret": "WOOCOMMERCE_API_SECRET",
    "username": "WOOCOMMERCE_API_USERNAME",
    "password": "WOOCOMMERCE_API_PASSWORD",
    "timeout": "WOOCOMMERCE_TIMEOUT",
}

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class WooCommerceSettings:
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    api_secret: str = ""
    username: str = ""
    password: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def credentials(self) -> Tuple[str, str]:
        """Return the pair used for Basic auth.

        The consumer key/secret pair is preferred; the username/password pair is
        only used when neither key nor secret is set.
        """
        if not self.api_key and not self.api_secret and (self.username or self.password):
            return self.username, self.password
        return self.api_key, self.api_secret


def _default_config() -> Dict[str, Any]:
    return {
        "woocommerce": {
            "base_url": DEFAULT_BASE_URL,
            "api_key": "",
            "api_secret": "",
            "username": "",
            "password": "",
            "timeout": DEFAULT_TIMEOUT,
        }
    }


def _deep_merge(dst: Dict[str, Any], src: Dict[str, Any]) -> None:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _deep_merge(dst[k], v)
        else:
            dst[k] = v


def load_environment(dotenv_path: Optional[str] = None) -> bool:
    """Load variables from a ``.env`` file without overriding the process environment.

    Without an explicit path the file is looked up from the working directory upward.
    """
    path = dotenv_path or find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(dotenv_path=path, override=False)


def load_config() -> Dict[str, Any]:
    """Return defaults merged with the YAML file, if one exists."""
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE
    merged = _default_config()
    path = Path(os.getenv("WOOCOMMERCE_CONFIG_PATH") or DEFAULT_CONFIG_PATH)
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid configuration file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        _deep_merge(merged, data)
    _CONFIG_CACHE = merged
    return merged


def clear_config_cache() -> None:
    global _CONFIG_CACHE
    _CONFIG_CACHE = None


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid WooCommerce timeout: {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"WooCommerce timeout must be positive, got {timeout}")
    return timeout


def get_settings() -> WooCommerceSettings:
    """Resolve settings from defaults, the YAML file and the current environment."""
    values = copy.deepcopy(load_config().get("woocommerce") or {})
    for field, env_name in _ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            values[field] = raw.strip()

    base_url = str(values.get("base_url") or DEFAULT_BASE_URL).rstrip("/")
    return WooCommerceSettings(
        base_url=base_url,
        api_key=str(values.get("api_key") or ""),
        api_secret=str(values.get("api_secret") or ""),
        username=str(values.get("username") or ""),
        password=str(values.get("password") or ""),
        timeout=_parse_timeout(values.get("timeout", DEFAULT_TIMEOUT)),
    )


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "WooCommerceSettings",
    "load_environment",
    "load_config",
    "clear_config_cache",
    "get_settings",
]
