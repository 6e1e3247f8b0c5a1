"""Connection settings for the external data store."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

from rankpoll.errors import ConfigurationError

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class StoreConfig:
    """Where the poll store lives and how to authenticate to it.

    Attributes:
        url: Base URL of the store, e.g. https://xyz.supabase.co
        anon_key: Public (anonymous role) API key
        timeout: Per-request timeout in seconds
    """
    url: str
    anon_key: str
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Read SUPABASE_URL, SUPABASE_ANON_KEY and optional SUPABASE_TIMEOUT.

        Raises:
            ConfigurationError: If a required variable is missing or the
                timeout is not a number
        """
        env = os.environ if environ is None else environ
        url = env.get("SUPABASE_URL", "").strip()
        key = env.get("SUPABASE_ANON_KEY", "").strip()
        if not url:
            raise ConfigurationError("Store URL is required. (Missing SUPABASE_URL)")
        if not key:
            raise ConfigurationError("Store anon key is required. (Missing SUPABASE_ANON_KEY)")

        raw_timeout = env.get("SUPABASE_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"Invalid SUPABASE_TIMEOUT: {raw_timeout!r}") from e

        return cls(url=url.rstrip("/"), anon_key=key, timeout=timeout)
