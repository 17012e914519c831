from unittest.mock import patch

import pytest

from deluge_client import cli
from deluge_client.client import DelugeClient
from deluge_client.config import Config


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "LOG_PATH", str(tmp_path / "deluge_client.log"))


def run(deluge_server, *args):
    return cli.main(["--url", deluge_server.url, "--password", "pass", *args])


class TestCli:
    def test_list(self, deluge_server, capsys):
        deluge_server.reply({
            "id": 2,
            "result": {"torrents": {
                "bbb": {"name": "Second", "ratio": 0.5, "progress": 50.0, "message": "OK"},
                "aaa": {"name": "First", "ratio": 2.0, "progress": 100.0, "message": "Seeding"},
            }},
            "error": None,
        })
        run(deluge_server, "list")

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("aaa")
        assert "First" in lines[0]
        assert "Seeding" in lines[0]
        assert lines[1].startswith("bbb")
        assert deluge_server.methods() == ["auth.login", "web.update_ui"]

    def test_get(self, deluge_server, capsys):
        deluge_server.reply({
            "id": 2,
            "result": {"type": "dir", "contents": {
                "movie.mkv": {"type": "file", "path": "movie.mkv", "ratio": 1.5, "progress": 100.0},
            }},
            "error": None,
        })
        run(deluge_server, "get", "abc")

        out = capsys.readouterr().out
        assert "movie.mkv" in out
        assert "1.500" in out

    def test_get_not_found(self, deluge_server):
        deluge_server.reply({"id": 2, "result": None, "error": None})

        with pytest.raises(SystemExit) as exc_info:
            run(deluge_server, "get", "abc")

        assert exc_info.value.code == 1

    def test_add(self, deluge_server, capsys):
        deluge_server.reply({"id": 2, "result": True, "error": None})
        run(deluge_server, "add", "magnet:?xt=urn:btih:abc")

        assert "Torrent added" in capsys.readouterr().out
        assert deluge_server.requests[-1]["params"] == [[{"path": "magnet:?xt=urn:btih:abc", "options": ""}]]

    def test_remove_error_exits_non_zero(self, deluge_server, capsys):
        deluge_server.reply({"id": 2, "result": False, "error": {"code": 4, "message": "Torrent not found"}})

        with pytest.raises(SystemExit) as exc_info:
            run(deluge_server, "remove", "abc")

        assert exc_info.value.code == 1
        assert "Torrent not found" in capsys.readouterr().err

    def test_top(self, deluge_server, capsys):
        deluge_server.reply({"id": 2, "result": None, "error": None})
        run(deluge_server, "top", "abc")

        assert deluge_server.methods() == ["auth.login", "core.queue_top"]

    def test_wrong_password(self, deluge_server, capsys):
        deluge_server.login_response = {"id": 1, "result": False, "error": None}

        with pytest.raises(SystemExit) as exc_info:
            run(deluge_server, "list")

        assert exc_info.value.code == 1
        assert deluge_server.methods() == ["auth.login"]

    def test_empty_password(self, deluge_server):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--url", deluge_server.url, "--password", "", "list"])

        assert exc_info.value.code == 2
        assert deluge_server.requests == []

    def test_operation_value_error_is_not_a_usage_error(self, deluge_server):
        with patch.object(DelugeClient, "get_all", side_effect=ValueError("bad value")):
            with pytest.raises(ValueError):
                run(deluge_server, "list")

        assert deluge_server.methods() == ["auth.login"]
