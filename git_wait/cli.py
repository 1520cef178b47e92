#!/usr/bin/env python3
"""git_wait/cli.py — git wrapper that waits for index.lock before running.

Forwards every argument to git unchanged, after waiting (up to
GIT_WAIT_TIMEOUT_MS, default 5000) for another git process to release the
repository's index.lock. Exits with git's exit code.

Usage: python3 git_wait/cli.py <git args...>     (or alias git=git-wait)
"""
import os
import sys
from pathlib import Path

# --- Resolve project root & imports ---
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from git_wait.lib.config import WaitConfig
from git_wait.lib.git_dir import find_index_lock
from git_wait.lib.launcher import exit_like, run_git
from git_wait.lib.lock_wait import WaitOutcome, wait_for_lock

INTERRUPTED_EXIT = 130


def main(argv: list[str] | None = None, environ=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ

    config = WaitConfig.from_env(environ)
    lock_path = find_index_lock(environ=environ)
    try:
        outcome = wait_for_lock(lock_path, config)
    except KeyboardInterrupt:
        print(flush=True)
        print("❌ Interrupted while waiting on index.lock", file=sys.stderr, flush=True)
        return INTERRUPTED_EXIT

    # Fail open: the wait is best-effort, git reports a lock still held itself
    if outcome is WaitOutcome.TIMED_OUT:
        print(f"⚠️  Timed out after {config.timeout_ms}ms waiting on index.lock, running git anyway",
              file=sys.stderr, flush=True)
    return exit_like(run_git(list(argv)))


if __name__ == "__main__":
    sys.exit(main())
