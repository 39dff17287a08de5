import sqlite3

import pytest
from flask import Flask, g

from cleanusers.handlers import Handler
from cleanusers.repository import Repository, create_schema
from cleanusers.services import Service


class _BrokenService:
    def add_user(self, user):
        raise RuntimeError("db down")

    def get_all_users(self):
        raise RuntimeError("db down")

    def get_user_by_id(self, id):
        raise RuntimeError("db down")

    def del_user_by_id(self, id):
        raise RuntimeError("db down")

    def upd_user_by_id(self, user, id):
        raise RuntimeError("db down")


def _make_app(service):
    app = Flask(__name__)
    handler = Handler(service)
    app.add_url_rule("/adduser", "add_user", handler.add_user, methods=["POST"])
    app.add_url_rule("/allusers", "all", handler.get_all_users, methods=["GET"])
    app.add_url_rule("/user/<id>", "get", handler.get_user_by_id, methods=["GET"])
    app.add_url_rule("/user/<id>", "del", handler.del_user_by_id, methods=["DELETE"])
    app.add_url_rule("/user/<id>", "upd", handler.upd_user_by_id, methods=["PUT"])
    return app


@pytest.fixture
def service():
    db = sqlite3.connect(":memory:", check_same_thread=False)
    create_schema(db)
    yield Service(Repository(db))
    db.close()


@pytest.fixture
def client(service):
    return _make_app(service).test_client()


@pytest.fixture
def broken():
    return _make_app(_BrokenService()).test_client()


def test_add_user_reports_created_user(client):
    response = client.post("/adduser", json={"name": "Ann", "age": 30})
    assert response.status_code == 200
    assert response.get_json() == {"message": "Имя: Ann. Возраст: 30. ID: 1"}
    assert response.content_type == "application/json; charset=utf-8"


@pytest.mark.parametrize("body", [b"", b"{oops", b'{"age": "old"}', b"[1]"])
def test_add_user_bad_json(client, body):
    response = client.post("/adduser", data=body)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Неверный JSON"}


def test_add_user_service_failure(broken):
    response = broken.post("/adduser", json={"name": "Ann", "age": 30})
    assert response.status_code == 500
    assert response.get_json() == {"error": "Bad request"}


def test_get_all_users_empty_is_null(client):
    response = client.get("/allusers")
    assert response.status_code == 200
    assert response.data == b"null"


def test_get_all_users_lists_indented(client):
    client.post("/adduser", json={"name": "Ann", "age": 30})
    client.post("/adduser", json={"name": "Bob", "age": 25})
    response = client.get("/allusers")
    assert [u["name"] for u in response.get_json()] == ["Ann", "Bob"]
    assert b"\n    " in response.data


def test_get_all_users_failure(broken):
    response = broken.get("/allusers")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}


def test_get_user_by_id(client):
    client.post("/adduser", json={"name": "Ann", "age": 30})
    response = client.get("/user/1")
    assert response.get_json() == {"id": 1, "name": "Ann", "age": 30}
    assert client.get("/user/+1").get_json() == response.get_json()


@pytest.mark.parametrize("raw", ["abc", "1_0", "%201", "1.0"])
def test_get_user_bad_id(client, raw):
    response = client.get(f"/user/{raw}")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Неверный ID (не число)"}


def test_get_user_missing(client):
    response = client.get("/user/5")
    assert response.status_code == 404
    assert "Пользователь не найден" in response.get_data(as_text=True)


def test_get_user_failure(broken):
    response = broken.get("/user/5")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Ошибка сервера при получении пользователя"}


def test_delete_user_then_missing(client):
    client.post("/adduser", json={"name": "Ann", "age": 30})
    first = client.delete("/user/1")
    assert first.status_code == 200
    assert first.get_json() == {"message": "Пользователь удален"}
    second = client.delete("/user/1")
    assert second.status_code == 404


def test_delete_failure_and_bad_id(broken):
    assert broken.delete("/user/x").status_code == 400
    response = broken.delete("/user/1")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Ошибка сервера при удалении пользователя"}


def test_update_user(client):
    client.post("/adduser", json={"name": "Ann", "age": 30})
    response = client.put("/user/1", json={"name": "Anna", "age": 31, "id": 77})
    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "name": "Anna", "age": 31}
    assert client.get("/user/1").get_json() == response.get_json()


def test_update_errors(client, broken):
    assert client.put("/user/1", json={"name": "x", "age": 1}).status_code == 404
    assert client.put("/user/q", json={"name": "x", "age": 1}).status_code == 400
    assert client.put("/user/1", data=b"nope").get_json() == {"error": "Неверный JSON"}
    failed = broken.put("/user/1", json={"name": "x", "age": 1})
    assert failed.status_code == 500


def test_html_characters_are_escaped(client):
    client.post("/adduser", json={"name": "<b>", "age": 1})
    response = client.get("/user/1")
    assert b"\\u003cb\\u003e" in response.data
    assert response.get_json()["name"] == "<b>"


def test_handler_sets_log_message(service):
    app = Flask(__name__)
    handler = Handler(service)
    with app.test_request_context("/user/abc"):
        response = handler.get_user_by_id("abc")
        assert response.status_code == 400
        assert g.log_message == "Неверный ID (не число)"