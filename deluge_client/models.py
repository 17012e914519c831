from dataclasses import dataclass, field
from typing import List


@dataclass
class Torrent:
    """A transfer tracked by the daemon."""
    id: str
    name: str = ""
    progress: float = 0.0
    share_ratio: float = 0.0
    files: List[str] = field(default_factory=list)
    message: str = ""

    def __str__(self):
        return f"id={self.id} name={self.name} ratio={self.share_ratio:f} files={self.files}"
