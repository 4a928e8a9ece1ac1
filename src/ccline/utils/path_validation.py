"""Path sanitization before handing directories to subprocesses."""

# Shell metacharacters stripped from working directories. Backslashes are
# kept because they separate components in Windows paths.
SHELL_METACHARACTERS = frozenset(";&|`$(){}[]<>'\"")


def sanitize_path(path: str) -> str:
    """Remove shell metacharacters from a path."""
    return "".join(c for c in path if c not in SHELL_METACHARACTERS)
