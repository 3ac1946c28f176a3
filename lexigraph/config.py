"""Configuration loader for lexigraph.

Loads defaults from config.json (LEXIGRAPH_CONFIG or project root), with
hardcoded fallbacks.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .schema import Language

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "languages": "en:English,ru:Russian,de:German",
    "log_level": "WARNING",
    "quiet": False,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json from the environment or next to the package."""
    env_path = os.environ.get("LEXIGRAPH_CONFIG")
    if env_path:
        return Path(env_path)

    paths = [
        Path(__file__).parent.parent / "config.json",  # lexigraph -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def parse_languages(text: str) -> list[Language]:
    """Parse "code:Title,code:Title" into languages.

    A code without a title gets an empty title. Blank entries are skipped.
    """
    languages = []
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        code, _, title = entry.partition(":")
        languages.append(Language(code.strip(), title.strip()))
    return languages


# Convenience accessors
def default_languages() -> str:
    return get_default("languages", FALLBACK_DEFAULTS["languages"])


def default_log_level() -> str:
    return get_default("log_level", FALLBACK_DEFAULTS["log_level"])
