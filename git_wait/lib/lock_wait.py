"""Poll for index.lock to disappear, bounded by a monotonic deadline."""
import enum
import sys
import time
from pathlib import Path
from typing import Callable, TextIO

from git_wait.lib.config import WaitConfig


class WaitOutcome(enum.Enum):
    ABSENT = "absent"
    RELEASED = "released"
    TIMED_OUT = "timed_out"


def lock_exists(lock_path: Path) -> bool:
    """Existence check that treats an unsearchable git dir as "no lock".

    Path.exists() raises PermissionError there; git itself reports that case.
    """
    try:
        return lock_path.exists()
    except OSError:
        return False


def wait_for_lock(
    lock_path: Path | None,
    config: WaitConfig,
    out: TextIO | None = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> WaitOutcome:
    """Block while lock_path exists, up to config.timeout_ms.

    Prints nothing when the lock is absent. Otherwise prints
    "Waiting on index.lock... " then "done!" on release; on timeout the
    status line is just terminated and the caller decides what to do.
    """
    if out is None:
        out = sys.stdout

    if lock_path is None or not lock_exists(lock_path):
        return WaitOutcome.ABSENT

    print("Waiting on index.lock... ", end="", file=out, flush=True)
    deadline = clock() + config.timeout
    while True:
        remaining = deadline - clock()
        if remaining <= 0:
            break
        sleep(min(config.poll_interval, remaining))
        if not lock_exists(lock_path):
            print("done!", file=out, flush=True)
            return WaitOutcome.RELEASED

    print(file=out, flush=True)
    return WaitOutcome.TIMED_OUT
