"""
Data types shared by the local and remote package databases
"""

from dataclasses import dataclass, field
from typing import Dict, List

# Value of any field a desc record did not provide
UNSET = "none"


@dataclass
class PackageRecord:
    """
    One package as described by a desc record.

    Attributes:
        name: Package name
        version: Full version string, compared by equality only
        origin_repo: Repository the record came from (UNSET for local records)
    """

    name: str = UNSET
    version: str = UNSET
    origin_repo: str = UNSET

    @property
    def package_id(self) -> str:
        """Return repo/name identifier."""
        return f"{self.origin_repo}/{self.name}"


@dataclass
class RepositoryConfig:
    """A repository section of pacman.conf with its servers in priority order."""

    name: str
    servers: List[str] = field(default_factory=list)


# Package name -> record
PackageMap = Dict[str, PackageRecord]
