import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List

from dotenv import load_dotenv


load_dotenv()


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _env_list(name: str, default: str = "") -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Attribute defaults are read once at import; the ``*_list``/``load_*``
    helpers re-read the environment on every call.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    APP_DEBUG: bool = _env_flag("APP_DEBUG", "true" if os.getenv("ENVIRONMENT") == "development" else "false")

    REQUIREJS_BASE_URL: str = os.getenv("REQUIREJS_BASE_URL", "js")
    REQUIREJS_USE_ALMOND: bool = _env_flag("REQUIREJS_USE_ALMOND", "false")
    REQUIREJS_CONFIG_FILE: str = os.getenv("REQUIREJS_CONFIG_FILE", "")
    REQUIREJS_NAMESPACES: str = os.getenv("REQUIREJS_NAMESPACES", "")

    ASSETS_BASE_PATH: str = os.getenv("ASSETS_BASE_PATH", "")
    ASSETS_BASE_URLS: str = os.getenv("ASSETS_BASE_URLS", "")
    ASSETS_VERSION: str = os.getenv("ASSETS_VERSION", "")

    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en")
    SUPPORTED_LOCALES: str = os.getenv("SUPPORTED_LOCALES", "en")

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        merged = _env_list("CORS_ALLOWED_ORIGINS", "http://localhost:3000")
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def supported_locales(cls) -> List[str]:
        return [o.strip() for o in cls.SUPPORTED_LOCALES.split(",") if o.strip()] or [cls.DEFAULT_LOCALE]

    @classmethod
    def asset_base_urls(cls) -> List[str]:
        return [u.strip() for u in cls.ASSETS_BASE_URLS.split(",") if u.strip()]

    @classmethod
    def namespaces(cls) -> Dict[str, str]:
        """Parse ``namespace=directory`` pairs from REQUIREJS_NAMESPACES."""
        result: Dict[str, str] = {}
        for pair in cls.REQUIREJS_NAMESPACES.split(","):
            if not pair.strip():
                continue
            namespace, sep, directory = pair.partition("=")
            if not sep or not namespace.strip() or not directory.strip():
                raise ValueError(f"Invalid REQUIREJS_NAMESPACES entry '{pair.strip()}', expected namespace=directory")
            result[namespace.strip()] = directory.strip()
        return result

    @classmethod
    def load_requirejs_file(cls) -> Dict[str, Any]:
        """Load paths/shim/deps/priority/options from REQUIREJS_CONFIG_FILE."""
        if not cls.REQUIREJS_CONFIG_FILE:
            return {}
        try:
            with open(cls.REQUIREJS_CONFIG_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Cannot read REQUIREJS_CONFIG_FILE {cls.REQUIREJS_CONFIG_FILE}: {e}")
        if not isinstance(data, dict):
            raise ValueError("REQUIREJS_CONFIG_FILE must contain a JSON object")
        return data

    @classmethod
    def validate(cls) -> None:
        cls.namespaces()
        cls.load_requirejs_file()
