"""Domain data structures."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

VISIBILITIES = ("all", "public", "private", "internal")
FORMATS = ("simple", "full", "json")
SORT_FIELDS = ("name", "pushed", "created")

DEFAULT_VISIBILITY = "all"
DEFAULT_FORMAT = "simple"
DEFAULT_SORT = "name"


@dataclass(frozen=True)
class RunOptions:
    """Command line options for one run."""

    owner: str
    visibility: str = DEFAULT_VISIBILITY
    format: str = DEFAULT_FORMAT
    sort: str = DEFAULT_SORT
    output_file: Optional[str] = None
    clone_dir: Optional[str] = None
    clone_repos: bool = False


@dataclass(frozen=True)
class RepoRecord:
    """A single repository entry returned by `gh repo list --json`."""

    name: str
    url: str = ""
    ssh_url: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    pushed_at: Optional[str] = None
    created_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RepoRecord":
        return cls(
            name=str(data.get("name") or ""),
            url=str(data.get("url") or ""),
            ssh_url=data.get("sshUrl"),
            description=data.get("description"),
            visibility=data.get("visibility"),
            pushed_at=data.get("pushedAt"),
            created_at=data.get("createdAt"),
            raw=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the entry as received, without dropping unknown fields."""
        if self.raw:
            return dict(self.raw)
        return {
            "name": self.name,
            "url": self.url,
            "sshUrl": self.ssh_url,
            "description": self.description,
            "visibility": self.visibility,
            "pushedAt": self.pushed_at,
            "createdAt": self.created_at,
        }


@dataclass
class CloneStats:
    """Counters collected by the clone phase."""

    cloned: int = 0
    updated: int = 0
    failed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "cloned": self.cloned,
            "updated": self.updated,
            "failed": self.failed,
        }
