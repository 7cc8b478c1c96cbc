# What it does: Holds the version-control state collected for a single prompt render
# What data structure it uses: An immutable record (frozen dataclass) and a three-valued enum for the working tree

from dataclasses import dataclass
from enum import Enum

VCS_NAME = 'git'


class Modification(Enum):
    CLEAN = 'clean'
    DIRTY = 'dirty'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class RepoState:
    available: bool = False
    name: str = ''
    branch: str = ''
    revision: str = ''
    status: Modification = Modification.CLEAN

    @property
    def modified(self):
        return self.status is Modification.DIRTY

    @classmethod
    def unavailable(cls): # No repository found: every field zero-valued
        return cls()
