# =============================================================================
# core/config.py  —  Immutable Server Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the HUDU credential and base URL from the environment and packs
#   them into a frozen HuduConfig value.
#
# ENVIRONMENT VARIABLES:
#   HUDU_API_KEY          → required, sent as the x-api-key header
#   HUDU_BASE_URL         → required, e.g. https://yourcompany.huducloud.com
#   HUDU_TIMEOUT_SECONDS  → optional transport timeout (default 30)
#
#   main.py calls load_dotenv() before from_env(), so a .env file in the
#   working directory works the same as exported variables.
#
# NO GLOBALS:
#   The config is built once and handed to HuduClient at construction time.
#   Nothing else reads the environment.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

from core.errors import ConfigurationError

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class HuduConfig:
    """Connection settings for one HUDU instance."""

    api_key: str
    base_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks
        return (
            f"HuduConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HuduConfig":
        """Build a config from environment variables.

        Every problem is collected before raising, so a user missing both
        variables sees both in one message.

        Raises:
            ConfigurationError: listing each invalid variable.
        """
        env = os.environ if environ is None else environ
        issues = []

        api_key = env.get("HUDU_API_KEY", "").strip()
        if not api_key:
            issues.append("HUDU_API_KEY: HUDU_API_KEY is required")

        base_url = env.get("HUDU_BASE_URL", "").strip()
        if not _is_valid_url(base_url):
            issues.append("HUDU_BASE_URL: HUDU_BASE_URL must be a valid URL")

        raw_timeout = env.get("HUDU_TIMEOUT_SECONDS")
        timeout = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                issues.append("HUDU_TIMEOUT_SECONDS: must be a number of seconds")
            else:
                if timeout <= 0:
                    issues.append("HUDU_TIMEOUT_SECONDS: must be greater than 0")

        if issues:
            raise ConfigurationError(
                f"Configuration validation failed: {', '.join(issues)}"
            )

        return cls(api_key=api_key, base_url=base_url.rstrip("/"), timeout_seconds=timeout)


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
