"""Run git as a child with inherited standard streams and relay its exit status."""
import os
import signal
import subprocess
import sys
from typing import TextIO

GIT_CMD = "git"
LAUNCH_ERROR_EXIT = 127

# Relayed to git while it runs; a terminal Ctrl-C may reach git twice, which git tolerates.
_FORWARDED_SIGNALS = (signal.SIGINT, signal.SIGQUIT, signal.SIGTERM, signal.SIGHUP)


def exit_code_for(returncode: int) -> int:
    """Map a Popen returncode to a process exit code (signal N -> 128 + N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def exit_like(returncode: int) -> int:
    """Die from the same signal that killed git, so the parent sees WIFSIGNALED.

    Returns the exit code to use instead when returncode is a normal exit, or
    when the signal's default action does not terminate this process.
    """
    if returncode < 0:
        sig = -returncode
        signal.signal(sig, signal.SIG_DFL)
        os.kill(os.getpid(), sig)
    return exit_code_for(returncode)


def run_git(args: list[str], err: TextIO | None = None) -> int:
    """Spawn `git <args>` with the caller's stdin/stdout/stderr and wait for it.

    Returns git's Popen returncode (negative N if killed by signal N), or
    LAUNCH_ERROR_EXIT if git could not be started.
    """
    if err is None:
        err = sys.stderr
    cmd = [GIT_CMD, *args]
    try:
        proc = subprocess.Popen(cmd)
    except OSError as e:
        print(f"❌ Error executing git: {e}", file=err, flush=True)
        return LAUNCH_ERROR_EXIT

    def _forward(signum, frame):
        try:
            proc.send_signal(signum)
        except ProcessLookupError:
            pass

    previous = {}
    for sig in _FORWARDED_SIGNALS:
        previous[sig] = signal.signal(sig, _forward)
    try:
        return proc.wait()
    finally:
        for sig, handler in previous.items():
            # None: the old handler was not installed from Python
            signal.signal(sig, signal.SIG_DFL if handler is None else handler)
