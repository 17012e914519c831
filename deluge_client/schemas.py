"""
Response envelopes for the Deluge Web JSON-RPC methods.

Every response has the shape {"id": int, "result": ..., "error": null|{...}}.
The result differs per method, so each method gets its own envelope model
and the client validates the body against the one it expects.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


FILE = "file"
DIRECTORY = "dir"


class RpcErrorBody(BaseModel):
    code: int = 0
    message: str = ""


class RpcResponse(BaseModel):
    """Envelope for methods whose result is only checked for errors."""
    id: Optional[int] = None
    result: Any = None
    error: Optional[RpcErrorBody] = None

    @property
    def failed(self) -> bool:
        return self.error is not None and self.error.code != 0

    @property
    def error_code(self) -> int:
        return self.error.code if self.error else 0

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ""


class BoolResponse(RpcResponse):
    """auth.login"""
    result: Optional[bool] = None


class TorrentEntry(BaseModel):
    name: str = ""
    progress: float = 0.0
    ratio: float = 0.0
    message: str = ""


class TorrentSet(BaseModel):
    torrents: Dict[str, TorrentEntry] = Field(default_factory=dict)


class UpdateUiResponse(RpcResponse):
    """web.update_ui"""
    result: Optional[TorrentSet] = None


class FileNode(BaseModel):
    """
    One node of the tree returned by web.get_torrent_files.

    Directory nodes own a mapping of child name to node in `contents`.
    A file node has no contents. The kind comes only from `type`; a node
    without one is neither a file nor a directory.
    """
    type: str = ""
    path: str = ""
    progress: float = 0.0
    ratio: float = 0.0
    priority: int = 0
    size: int = 0
    contents: Optional[Dict[str, "FileNode"]] = None

    @property
    def is_file(self) -> bool:
        return self.type == FILE

    @property
    def is_dir(self) -> bool:
        return self.type == DIRECTORY

    @property
    def children(self) -> Dict[str, "FileNode"]:
        return self.contents or {}


FileNode.model_rebuild()


class FileTreeResponse(RpcResponse):
    """web.get_torrent_files"""
    result: Optional[FileNode] = None
