"""Wait configuration — resolved once from the environment at startup."""
import os
from dataclasses import dataclass
from typing import Mapping

TIMEOUT_ENV_VAR = "GIT_WAIT_TIMEOUT_MS"
POLL_ENV_VAR = "GIT_WAIT_POLL_MS"

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_POLL_INTERVAL_MS = 50


def _parse_int(raw: str | None, minimum: int) -> int | None:
    """Parse raw as an integer >= minimum. Returns None for anything else."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= minimum else None


@dataclass(frozen=True)
class WaitConfig:
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS

    @property
    def timeout(self) -> float:
        return self.timeout_ms / 1000

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WaitConfig":
        """Build a config from GIT_WAIT_TIMEOUT_MS / GIT_WAIT_POLL_MS.

        Unset or invalid values (non-numeric, negative timeout, non-positive
        poll interval) fall back to the defaults without raising.
        """
        if environ is None:
            environ = os.environ
        timeout_ms = _parse_int(environ.get(TIMEOUT_ENV_VAR), minimum=0)
        poll_ms = _parse_int(environ.get(POLL_ENV_VAR), minimum=1)
        return cls(
            timeout_ms=DEFAULT_TIMEOUT_MS if timeout_ms is None else timeout_ms,
            poll_interval_ms=DEFAULT_POLL_INTERVAL_MS if poll_ms is None else poll_ms,
        )
