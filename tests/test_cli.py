import json

import pytest

from products_client.cli import build_parser, main
from products_client.services.transport import Transport, TransportResponse


class CannedTransport(Transport):
    def __init__(self, status_code: int, body: bytes = b"") -> None:
        self.response = TransportResponse(status_code, body)
        self.calls = []

    async def send(self, method, url, *, params=None, json=None, headers=None):
        self.calls.append((method, url, params, json))
        return self.response


def test_list_prints_page(capsys):
    body = {"products": [{"id": "1"}], "total": 1, "page": 1, "totalPages": 1}
    transport = CannedTransport(200, json.dumps(body).encode())

    code = main(["--base-url", "http://api.test", "list", "--page", "1", "--sort-by", "name"],
                transport=transport)

    assert code == 0
    assert json.loads(capsys.readouterr().out) == body
    assert transport.calls == [("GET", "http://api.test/products", [("page", "1"), ("sortBy", "name")], None)]


def test_create_sends_json_argument(capsys):
    transport = CannedTransport(201, b'{"id": "9", "name": "Saw"}')

    code = main(["--base-url", "http://api.test", "create", '{"name": "Saw"}'], transport=transport)

    assert code == 0
    assert transport.calls[0][0] == "POST"
    assert transport.calls[0][3] == {"name": "Saw"}
    assert json.loads(capsys.readouterr().out) == {"id": "9", "name": "Saw"}


def test_delete_prints_nothing(capsys):
    transport = CannedTransport(204)

    code = main(["--base-url", "http://api.test", "delete", "9"], transport=transport)

    assert code == 0
    assert capsys.readouterr().out == ""
    assert transport.calls[0][:2] == ("DELETE", "http://api.test/products/9")


def test_api_error_exits_with_status_one(capsys):
    transport = CannedTransport(404, b'{"message": "Product not found"}')

    code = main(["--base-url", "http://api.test", "get", "missing"], transport=transport)

    assert code == 1
    assert "Product not found" in capsys.readouterr().err


def test_sort_order_choices_are_enforced():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "--sort-order", "up"])


def test_missing_base_url_exits_with_status_one(capsys, monkeypatch):
    monkeypatch.delenv("API_BASE_URL", raising=False)

    code = main(["get", "1"], transport=CannedTransport(200, b"{}"))

    assert code == 1
    assert "API_BASE_URL" in capsys.readouterr().err


def test_invalid_timeout_in_environment_exits_with_status_one(capsys, monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "soon")

    code = main(["--base-url", "http://api.test", "get", "1"], transport=CannedTransport(200, b"{}"))

    assert code == 1
    assert "Configuration error" in capsys.readouterr().err
