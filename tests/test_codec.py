import json

import pytest

from todo_api.app.core.codec import decode, encode, encode_empty, encode_error
from todo_api.app.core.errors import DecodeError
from todo_api.app.schemas.todo import Todo


def test_decode_valid_body() -> None:
    todo = decode(b'{"title": "buy milk", "completed": false}')
    assert todo == Todo(title="buy milk", completed=False)


def test_decode_ignores_unknown_keys() -> None:
    todo = decode(b'{"title": "a", "completed": true, "priority": 3}')
    assert todo == Todo(title="a", completed=True)


def test_decode_does_not_check_title_length() -> None:
    assert decode(b'{"title": "", "completed": false}').title == ""


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"{",
        b"not json",
        b"[]",
        b'"buy milk"',
        b'{"title": "a"}',
        b'{"completed": false}',
        b'{"title": 1, "completed": false}',
        b'{"title": "a", "completed": "false"}',
        b'{"title": "a", "completed": 0}',
        b'{"title": null, "completed": false}',
    ],
)
def test_decode_rejects_malformed_bodies(body) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(body)
    assert excinfo.value.status_code == 400
    assert excinfo.value.message.startswith("Invalid request body")


def test_decode_error_names_the_field() -> None:
    with pytest.raises(DecodeError, match="completed"):
        decode(b'{"title": "a"}')


def test_encode_single_todo() -> None:
    response = encode(Todo(title="buy milk", completed=False))
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.body == b'{"title":"buy milk","completed":false}'


def test_encode_sequence_keeps_order() -> None:
    todos = [Todo(title="b", completed=True), Todo(title="a", completed=False)]
    response = encode(todos)
    assert json.loads(response.body) == [
        {"title": "b", "completed": True},
        {"title": "a", "completed": False},
    ]


def test_encode_empty_sequence() -> None:
    assert encode([]).body == b"[]"


def test_encode_empty() -> None:
    response = encode_empty()
    assert response.status_code == 200
    assert response.body == b""


def test_encode_error_is_plain_text() -> None:
    response = encode_error(404, "Todo not found")
    assert response.status_code == 404
    assert response.body == b"Todo not found"
    assert response.headers["content-type"].startswith("text/plain")
