import json
import os
import sys
import textwrap
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

FAKE_GIT = textwrap.dedent("""\
    #!{python}
    import json, os, signal, sys
    with open(os.environ["FAKE_GIT_ARGS"], "w") as f:
        json.dump(sys.argv[1:], f)
    print("fake-git ran", flush=True)
    if os.environ.get("FAKE_GIT_SLEEP"):
        import time
        time.sleep(float(os.environ["FAKE_GIT_SLEEP"]))
    if os.environ.get("FAKE_GIT_SIGNAL"):
        os.kill(os.getpid(), int(os.environ["FAKE_GIT_SIGNAL"]))
    sys.exit(int(os.environ.get("FAKE_GIT_EXIT", "0")))
""")


@pytest.fixture
def repo(tmp_path):
    """A directory that looks like a git work tree: it has a .git directory."""
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def fake_git(tmp_path):
    """Install a fake `git` executable that records its argv as JSON."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    git = bin_dir / "git"
    git.write_text(FAKE_GIT.format(python=sys.executable))
    git.chmod(0o755)
    args_file = tmp_path / "git-args.json"

    class FakeGit:
        path = git
        bin = bin_dir

        @staticmethod
        def called_with():
            if not args_file.exists():
                return None
            return json.loads(args_file.read_text())

    FakeGit.args_file = args_file
    return FakeGit


@pytest.fixture
def git_env(fake_git):
    """Minimal environment with the fake git first on PATH."""
    return {
        "PATH": f"{fake_git.bin}{os.pathsep}{os.environ.get('PATH', '/usr/bin:/bin')}",
        "HOME": os.environ.get("HOME", "/tmp"),
        "FAKE_GIT_ARGS": str(fake_git.args_file),
    }
