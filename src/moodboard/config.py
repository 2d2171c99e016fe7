"""Runtime configuration from arguments and environment."""

import logging
import os
from dataclasses import dataclass

DEFAULT_API_BASE = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 30.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Where the backend lives and how long to wait for it."""

    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT


def load_config(api: str | None = None, environ: dict[str, str] | None = None) -> Config:
    """Resolve config: explicit ``api`` wins, then MOODBOARD_API_BASE, then the default."""
    env = os.environ if environ is None else environ
    api_base = api or env.get("MOODBOARD_API_BASE") or DEFAULT_API_BASE

    timeout = DEFAULT_TIMEOUT
    raw_timeout = env.get("MOODBOARD_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning("ignoring invalid MOODBOARD_TIMEOUT %r", raw_timeout)

    return Config(api_base=api_base.rstrip("/"), timeout=timeout)
