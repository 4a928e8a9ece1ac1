"""Git metadata resolver — shells out to git for branch and status info."""

import logging
import subprocess

from ccline.types.git import GitInfo, GitStatus
from ccline.utils.path_validation import sanitize_path

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"

# Porcelain status codes for unmerged paths
_CONFLICT_MARKERS = ("UU", "AA", "DD")


def resolve_git_info(working_dir: str, show_sha: bool = False) -> GitInfo | None:
    """Collect branch, status and upstream tracking info for a directory.

    Returns None when the directory is not inside a git repository or git
    cannot be run at all.
    """
    cwd = sanitize_path(working_dir)
    if not cwd or not is_git_repo(cwd):
        return None

    branch = resolve_branch(cwd) or "detached"
    ahead, behind = resolve_ahead_behind(cwd)
    return GitInfo(
        branch=branch,
        status=resolve_status(cwd),
        ahead=ahead,
        behind=behind,
        sha=resolve_sha(cwd) if show_sha else None,
    )


def is_git_repo(cwd: str) -> bool:
    return _run_git(cwd, "rev-parse", "--git-dir") is not None


def resolve_branch(cwd: str) -> str:
    """Current branch name, or empty string on a detached HEAD."""
    branch = _run_git(cwd, "branch", "--show-current")
    if branch:
        return branch

    # Older git versions lack --show-current
    branch = _run_git(cwd, "symbolic-ref", "--short", "HEAD")
    return branch or ""


def resolve_status(cwd: str) -> GitStatus:
    output = _run_git(cwd, "status", "--porcelain", strip=False)
    if output is None or not output.strip():
        return GitStatus.CLEAN
    if any(line[:2] in _CONFLICT_MARKERS for line in output.splitlines()):
        return GitStatus.CONFLICTS
    return GitStatus.DIRTY


def resolve_ahead_behind(cwd: str) -> tuple[int, int]:
    """Commits ahead of and behind the upstream branch."""
    return (
        _commit_count(cwd, "@{u}..HEAD"),
        _commit_count(cwd, "HEAD..@{u}"),
    )


def resolve_sha(cwd: str) -> str | None:
    sha = _run_git(cwd, "rev-parse", "--short=7", "HEAD")
    return sha or None


def _commit_count(cwd: str, revision_range: str) -> int:
    output = _run_git(cwd, "rev-list", "--count", revision_range)
    try:
        return int(output) if output else 0
    except ValueError:
        return 0


def _run_git(cwd: str, *args: str, strip: bool = True) -> str | None:
    """Run a git command, returning stdout or None on any failure."""
    try:
        result = subprocess.run(
            [GIT_EXECUTABLE, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except (OSError, ValueError):
        logger.debug("Failed to run git %s in %s", " ".join(args), cwd, exc_info=True)
        return None

    if result.returncode != 0:
        logger.debug("git %s exited %d in %s", " ".join(args), result.returncode, cwd)
        return None
    return result.stdout.strip() if strip else result.stdout
