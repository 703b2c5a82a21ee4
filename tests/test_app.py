"""Tests for the Flask API, using the Flask test client."""

import pytest

from calculator_app.app import app
from calculator_app.sessions import session_count


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def press(client, button):
    return client.post("/api/press", json={"button": button})


def test_index_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"display-value" in r.data


def test_press_sequence(client):
    for button in ["2", "add", "3"]:
        assert press(client, button).status_code == 200
    r = press(client, "equals")
    data = r.get_json()
    assert data["display"] == "5"
    assert data["state"]["operator"] is None
    assert data["state"]["should_reset_display"] is True


def test_error_response(client):
    for button in ["5", "divide", "0"]:
        press(client, button)
    assert press(client, "equals").get_json()["display"] == "Error"
    r = client.post("/api/clear")
    assert r.get_json()["display"] == "0"


def test_state_endpoint(client):
    press(client, "7")
    press(client, "multiply")
    data = client.get("/api/state").get_json()
    assert data["display"] == "7"
    assert data["state"]["previous_input"] == "7"
    assert data["state"]["operator"] == "multiply"


def test_unknown_button_is_ignored(client):
    press(client, "4")
    r = press(client, "extra-btn")
    assert r.status_code == 200
    assert r.get_json()["display"] == "4"


def test_missing_payload(client):
    r = client.post("/api/press", data="not json", content_type="text/plain")
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_missing_button(client):
    r = client.post("/api/press", json={"value": "1"})
    assert r.status_code == 400
    assert "button" in r.get_json()["error"]


def test_sessions_are_independent():
    app.config["TESTING"] = True
    first, second = app.test_client(), app.test_client()
    press(first, "8")
    press(second, "3")
    assert first.get("/api/state").get_json()["display"] == "8"
    assert second.get("/api/state").get_json()["display"] == "3"


def test_end_session(client):
    press(client, "9")
    before = session_count()
    assert client.delete("/api/session").status_code == 200
    assert session_count() == before - 1
    assert client.delete("/api/session").status_code == 404
    assert client.get("/api/state").get_json()["display"] == "0"
