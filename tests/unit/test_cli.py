"""Unit tests for the command line entry point."""

import json

import httpx
import pytest

from tg_search_web import __main__ as cli

pytestmark = [pytest.mark.unit]


def test_parse_fetch_args():
    args = cli.parse_args(["fetch", "/api/search", "--query", "q=hi", "--query", "page=2", "--method", "post"])
    assert args.command == "fetch"
    assert cli._parse_query(args.query) == {"q": "hi", "page": "2"}
    assert args.method == "post"


def test_parse_query_rejects_missing_separator():
    with pytest.raises(SystemExit):
        cli._parse_query(["broken"])


def test_parse_data_accepts_json():
    assert cli._parse_data('{"phone_number": "+8613800000000"}') == {"phone_number": "+8613800000000"}
    assert cli._parse_data(None) is None


async def test_run_fetch_rejects_invalid_data_json():
    args = cli.parse_args(["fetch", "/api/login", "--method", "POST", "--data", "{not json"])
    with pytest.raises(SystemExit) as exc_info:
        await cli.run_fetch(args)
    assert "invalid --data JSON" in str(exc_info.value)


async def test_run_fetch_reports_failure(monkeypatch, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"code": 500, "message": "backend down"})

    real_async_client = httpx.AsyncClient

    def _mock_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr("tg_search_web.client.api.httpx.AsyncClient", _mock_client)

    args = cli.parse_args(["fetch", "/api/trending", "--base", "http://api.test"])
    exit_code = await cli.run_fetch(args)

    assert exit_code == 1
    printed = json.loads(capsys.readouterr().out)
    assert printed["ok"] is False
    assert printed["status"] == 200
    assert printed["error"] == "backend down"
