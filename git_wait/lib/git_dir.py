"""Locate the repository metadata directory and its index.lock."""
import os
from pathlib import Path
from typing import Mapping

GIT_DIR_NAME = ".git"
INDEX_LOCK_NAME = "index.lock"
GITDIR_PREFIX = "gitdir:"


def _read_gitdir_pointer(dot_git: Path) -> Path | None:
    """Resolve a `.git` file of the form `gitdir: <path>` (linked worktrees, submodules)."""
    try:
        text = dot_git.read_text().strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not text.startswith(GITDIR_PREFIX):
        return None
    target = Path(text[len(GITDIR_PREFIX):].strip())
    if not target.is_absolute():
        target = dot_git.parent / target
    return target


def _stat_kind(path: Path) -> str | None:
    """Classify path as "dir", "file" or None (missing, or a parent is unsearchable)."""
    try:
        if path.is_dir():
            return "dir"
        if path.exists():
            return "file"
    except OSError:
        pass
    return None


def find_git_directory(start: Path) -> Path | None:
    """Walk from start up to the filesystem root looking for a `.git` entry."""
    for directory in (start, *start.parents):
        dot_git = directory / GIT_DIR_NAME
        kind = _stat_kind(dot_git)
        if kind == "dir":
            return dot_git
        if kind == "file":
            # Malformed pointer: keep the .git path itself, its index.lock never exists
            return _read_gitdir_pointer(dot_git) or dot_git
    return None


def find_index_lock(cwd: Path | None = None, environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the index.lock path for the repository containing cwd, or None outside a repo.

    GIT_DIR takes precedence over discovery, as it does for git itself.
    """
    if environ is None:
        environ = os.environ
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError:
            return None

    env_git_dir = environ.get("GIT_DIR", "").strip()
    if env_git_dir:
        git_dir = Path(env_git_dir)
        if not git_dir.is_absolute():
            git_dir = cwd / git_dir
    else:
        git_dir = find_git_directory(cwd)
        if git_dir is None:
            return None
    return git_dir / INDEX_LOCK_NAME
