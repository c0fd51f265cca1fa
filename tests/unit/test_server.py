"""Tests for the NDJSON request server."""

import io
import json

from modflow.config import resolve_settings
from modflow.models import Request
from modflow.server import ModFlowServer


def _server(**kwargs):
    return ModFlowServer(resolve_settings(**kwargs))


def _ask(server, message):
    return json.loads(server.handle_line(json.dumps(message)))


def test_list_mods_request():
    response = _ask(_server(), {"id": 1, "method": "list_mods"})

    assert response["id"] == 1
    assert "move_left" in response["result"]["mods"]


def test_cursor_request():
    response = _ask(
        _server(),
        {
            "id": 2,
            "method": "move_left",
            "params": {
                "source": "f(a, b)",
                "language": "javascript",
                "cursor": {"line": 0, "column": 5},
            },
        },
    )

    result = response["result"]
    assert result["mod"] == "b, a"
    assert result["source"] == "f(b, a)"
    assert result["cursor"] == {"line": 0, "column": 2}
    assert "clipboard" not in result


def test_node_info_request_for_debug():
    response = _ask(
        _server(),
        {
            "id": 3,
            "method": "debug_node_under_cursor",
            "params": {
                "source": "a + b",
                "node_info": {
                    "range": {
                        "start": {"line": 0, "column": 4},
                        "end": {"line": 0, "column": 5},
                    },
                    "text": "b",
                    "type": "identifier",
                },
            },
        },
    )

    assert response["result"]["code"] == "DEBUG"
    assert "<<<identifier>>>" in response["result"]["message"]


def test_default_language_from_settings():
    server = _server(language="typescript")
    request = Request.model_validate(
        {
            "method": "move_left",
            "params": {
                "source": "type T = A | B;",
                "cursor": {"line": 0, "column": 13},
            },
        }
    )

    response = server.handle(request)

    assert response.result["source"] == "type T = B | A;"


def test_missing_anchor_is_no_match():
    response = _ask(_server(), {"id": 4, "method": "move_left", "params": {"source": "a"}})

    assert response["result"]["code"] == "NO_MATCH"


def test_unknown_method():
    response = _ask(
        _server(),
        {"id": 5, "method": "nope", "params": {"cursor": {"line": 0, "column": 0}}},
    )

    assert response["result"]["code"] == "UNKNOWN_MOD"


def test_bad_json_is_bad_request():
    response = json.loads(_server().handle_line("{not json"))

    assert response["id"] is None
    assert response["result"]["code"] == "BAD_REQUEST"


def test_invalid_request_keeps_its_id():
    response = _ask(_server(), {"id": 6, "params": {}})

    assert response["id"] == 6
    assert response["result"]["code"] == "BAD_REQUEST"


def test_serve_answers_each_line():
    stdin = io.StringIO(
        '{"id": 1, "method": "list_mods"}\n'
        "\n"
        '{"id": 2, "method": "move_right", "params": '
        '{"source": "f(a, b)", "cursor": {"line": 0, "column": 2}}}\n'
    )
    stdout = io.StringIO()

    _server().serve(stdin, stdout)

    lines = stdout.getvalue().splitlines()
    assert len(lines) == 2
    assert [json.loads(line)["id"] for line in lines] == [1, 2]
    assert json.loads(lines[1])["result"]["source"] == "f(b, a)"


def test_list_mods_accepts_null_params():
    response = _ask(_server(), {"id": 7, "method": "list_mods", "params": None})

    assert response["id"] == 7
    assert "call_nearest_expression" in response["result"]["mods"]
