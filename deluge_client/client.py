"""
Deluge Web UI JSON-RPC client.

Provides the DelugeClient class for talking to the JSON-RPC endpoint of
Deluge's web interface: logging in, adding magnet/torrent links, listing
torrents, reading a torrent's file list, moving torrents to the top of the
queue and removing them.

Every call is one blocking POST to <url>/json. The daemon ties authorization
to the session cookie set by auth.login, so connect() must be called first
and the same client instance reused afterwards.

The client keeps a request counter and a cookie jar. It is not safe to share
one instance between threads without external locking.
"""

from typing import Any, List, Optional, Type, TypeVar

import requests
import urllib3
from pydantic import ValidationError

from .cookies import PublicSuffixCookiePolicy
from .exceptions import (
    AuthenticationError,
    ResponseParseError,
    RpcError,
    TransportError,
)
from .logger import logger
from .models import Torrent
from .schemas import BoolResponse, FileTreeResponse, RpcResponse, UpdateUiResponse


RPC_PATH = "/json"
STATUS_FIELDS = ["name", "ratio", "message", "progress"]

R = TypeVar("R", bound=RpcResponse)


class DelugeClient:
    def __init__(self, url: str, password: str, timeout: Optional[float] = None):
        if not url:
            raise ValueError("url cannot be empty")
        if not password:
            raise ValueError("password cannot be empty")

        self.service_url = url + RPC_PATH
        self.password = password
        self.index = 1
        self.timeout = timeout

        # The Web UI usually runs on a trusted network with a self-signed cert
        self.session = requests.Session()
        self.session.verify = False
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        self.session.cookies.set_policy(PublicSuffixCookiePolicy())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.session.close()

    def connect(self):
        """Log in to the Web UI. Must be called before any other method."""
        response = self._request("auth.login", [self.password], BoolResponse)
        if response.result is not True:
            logger.warning(f"Authentication against {self.service_url} failed")
            raise AuthenticationError(response.error_code, response.error_message)
        self.index += 1

    def add_magnet(self, magnet: str):
        """Add a magnet or torrent link. The daemon starts downloading it."""
        response = self._request(
            "web.add_torrents",
            [[{"path": magnet, "options": ""}]],
            RpcResponse,
        )
        self._raise_for_error(response)
        self.index += 1

    def move_to_queue_top(self, torrent_id: str):
        """Move a torrent to the top of the download queue."""
        response = self._request("core.queue_top", [[torrent_id]], RpcResponse)
        self._raise_for_error(response)
        self.index += 1

    def get(self, torrent_id: str) -> Optional[Torrent]:
        """
        Get a torrent and its file list.

        Returns None when the daemon's answer is not a directory listing.
        Only the immediate children of the torrent's top entry are listed;
        files inside nested directories are not included.
        """
        response = self._request("web.get_torrent_files", [torrent_id], FileTreeResponse)
        self._raise_for_error(response)
        self.index += 1

        tree = response.result
        if tree is None or not tree.is_dir:
            return None

        if not tree.children:
            return Torrent(id=torrent_id)

        # A torrent's tree has a single top entry: the file itself or its folder
        entry = next(iter(tree.children.values()))

        if not entry.children:
            files = [entry.path]
        else:
            files = [name for name, child in entry.children.items() if child.is_file]

        return Torrent(
            id=torrent_id,
            name=entry.path,
            progress=entry.progress,
            share_ratio=entry.ratio,
            files=files,
        )

    def get_all(self) -> List[Torrent]:
        """List every torrent, ordered by torrent id."""
        response = self._request("web.update_ui", [STATUS_FIELDS, {}], UpdateUiResponse)
        self._raise_for_error(response)
        self.index += 1

        torrents = response.result.torrents if response.result else {}
        return [
            Torrent(
                id=torrent_id,
                name=entry.name,
                progress=entry.progress,
                share_ratio=entry.ratio,
                message=entry.message,
            )
            for torrent_id, entry in sorted(torrents.items())
        ]

    def remove(self, torrent_id: str):
        """Remove a torrent and erase its downloaded data."""
        response = self._request("core.remove_torrent", [torrent_id, True], RpcResponse)
        self._raise_for_error(response)
        self.index += 1

    def _raise_for_error(self, response: RpcResponse):
        if response.failed:
            logger.warning(
                f"Deluge error response id={response.id} "
                f"code={response.error_code} message={response.error_message!r}"
            )
            raise RpcError(response.error_code, response.error_message)

    def _request(self, method: str, params: List[Any], envelope: Type[R]) -> R:
        payload = {
            "id": self.index,
            "method": method,
            "params": params,
        }
        logger.debug(f"POST {self.service_url} id={self.index} method={method}")

        try:
            response = self.session.post(
                self.service_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Could not reach Deluge at {self.service_url}: {e}")
            raise TransportError(f"connection error. {e}") from e

        if response.status_code != 200:
            status = f"{response.status_code} {response.reason}"
            logger.warning(f"Deluge returned {status} for {method}")
            raise TransportError(
                f"server error response: {status}",
                status_code=response.status_code,
                reason=response.reason,
            )

        try:
            return envelope.model_validate(response.json())
        except (requests.exceptions.JSONDecodeError, ValidationError) as e:
            raise ResponseParseError("unable to parse response body") from e
