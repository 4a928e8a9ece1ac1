"""Git working-tree state types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GitStatus(str, Enum):
    CLEAN = "clean"
    DIRTY = "dirty"
    CONFLICTS = "conflicts"


@dataclass
class GitInfo:
    branch: str
    status: GitStatus = GitStatus.CLEAN
    ahead: int = 0
    behind: int = 0
    sha: Optional[str] = None
