from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.pagerduty.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Settings:
    """Connection and runtime settings, read from the environment.

    Fields:
        auth_token:  REST API token sent as ``Authorization: Token token=...``.
        base_url:    API root; override for proxies or test servers.
        timeout:     Per-request timeout in seconds, handed to httpx.
        from_email:  Default ``From`` header for mutating CLI commands.
        log_level:   Root logging level name.
    """

    auth_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    from_email: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        raw_timeout = os.getenv("PAGERDUTY_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            raise ValueError(
                f"PAGERDUTY_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        return cls(
            auth_token=os.getenv("PAGERDUTY_AUTH_TOKEN", ""),
            base_url=os.getenv("PAGERDUTY_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
            from_email=os.getenv("PAGERDUTY_FROM_EMAIL", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
