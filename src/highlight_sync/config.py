"""Configuration constants and credential loading for highlight-sync."""

import json
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

# Config file location. First file found is used.
CONFIG_FILES: list[Path] = [
    Path("~/.config/highlight-sync.json").expanduser(),
    Path("~/.config/secret/highlight-sync.json").expanduser(),
    Path(f"/run/user/{os.getuid()}/highlight-sync.json"),
]

# Siteleaf v1 API root.
API_BASE_URL: str = "https://api.siteleaf.com/v1/"

# Page size for collection listings; large enough to mean "everything".
DEFAULT_LIST_LIMIT: int = 9999

# Books are stamped in a fixed US Eastern (standard time) offset.
BOOK_DATE_OFFSET: timedelta = timedelta(hours=-5)

TITLE_TRUNCATE: int = 20
SNIPPET_TRUNCATE: int = 60


@dataclass(frozen=True)
class SiteleafConfig:
    """Credentials and collection names for the remote store."""

    api_key: str
    api_secret: str
    books_collection: str = "books"
    highlights_collection: str = "highlights"
    list_limit: int = DEFAULT_LIST_LIMIT
    timeout: float | None = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "SiteleafConfig":
        api_key = os.environ.get("SITELEAF_KEY") or data.get("key")
        api_secret = os.environ.get("SITELEAF_SECRET") or data.get("secret")
        if not api_key or not api_secret:
            msg = "Siteleaf credentials missing: set 'key' and 'secret' (or SITELEAF_KEY/SITELEAF_SECRET)"
            raise RuntimeError(msg)

        kwargs: dict[str, Any] = {"api_key": str(api_key), "api_secret": str(api_secret)}
        if data.get("books"):
            kwargs["books_collection"] = str(data["books"])
        if data.get("highlights"):
            kwargs["highlights_collection"] = str(data["highlights"])
        if data.get("limit"):
            kwargs["list_limit"] = int(data["limit"])
        if data.get("timeout") is not None:
            kwargs["timeout"] = float(data["timeout"])
        return cls(**kwargs)


def load_config(path: Path | None = None) -> SiteleafConfig:
    """Load the Siteleaf config from ``path`` or the first existing default file.

    When no file exists at all, credentials may still come from the environment.
    """
    if path is not None:
        config_path: Path | None = path.expanduser()
        if not config_path.is_file():
            msg = f"Config file not found: {str(config_path)!r}"
            raise RuntimeError(msg)
    else:
        config_path = next((p for p in CONFIG_FILES if p.is_file()), None)

    data: dict[str, Any] = {}
    if config_path is not None:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            msg = f"Config file {str(config_path)!r} must contain a JSON object"
            raise RuntimeError(msg)
    elif not (os.environ.get("SITELEAF_KEY") and os.environ.get("SITELEAF_SECRET")):
        msg = f"Cannot find highlight-sync config, was looking at {CONFIG_FILES!r}"
        raise RuntimeError(msg)

    return SiteleafConfig.from_mapping(data)
