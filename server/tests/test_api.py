import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("HTMLDECKS_WATERMARK", "true")
    monkeypatch.setenv("HTMLDECKS_DEFAULT_THEME", "startup-pitch")
    with TestClient(app) as client:
        yield client


def create_session(client, theme_id=None):
    response = client.post("/api/sessions", json={"theme_id": theme_id})
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_themes(client):
    themes = client.get("/api/themes").json()
    ids = [t["id"] for t in themes]
    assert ids[0] == "startup-pitch"
    assert "swiss-modern" in ids


def test_create_session_uses_default_theme(client):
    session = create_session(client)
    assert session["theme_id"] == "startup-pitch"
    assert session["current_slide_index"] == 0
    assert session["slide_count"] == len(session["deck"]["slides"])
    assert session["deck"]["companyName"] == "Acme Corp"


def test_unknown_theme_is_404(client):
    response = client.post("/api/sessions", json={"theme_id": "nope"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown theme: nope"


def test_unknown_session_is_404(client):
    assert client.get("/api/sessions/missing").status_code == 404


def test_select_theme(client):
    session = create_session(client)
    response = client.put(f"/api/sessions/{session['session_id']}/theme", json={"theme_id": "tokyo-neon"})
    assert response.status_code == 200
    assert response.json()["deck"]["companyName"] == "Neon Labs"


def test_add_and_remove_slides(client):
    """Test slide count changes and the last-slide refusal."""
    session = create_session(client, "swiss-modern")
    sid = session["session_id"]
    count = session["slide_count"]

    added = client.post(f"/api/sessions/{sid}/slides", json={"slide_type": "quote"}).json()
    assert added["slide_count"] == count + 1
    assert added["current_slide_index"] == count
    assert added["deck"]["slides"][-1]["type"] == "quote"

    assert client.post(f"/api/sessions/{sid}/slides", json={"slide_type": "timeline"}).status_code == 400
    assert client.delete(f"/api/sessions/{sid}/slides/99").status_code == 404

    for _ in range(count):
        assert client.delete(f"/api/sessions/{sid}/slides/0").status_code == 200

    response = client.delete(f"/api/sessions/{sid}/slides/0")
    assert response.status_code == 409
    assert response.json()["detail"] == "A deck needs at least one slide."
    assert client.get(f"/api/sessions/{sid}").json()["slide_count"] == 1


def test_export(client):
    """Test the HTML download with and without the watermark."""
    sid = create_session(client)["session_id"]

    response = client.get(f"/api/sessions/{sid}/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'filename="acme-corp-startup-pitch.html"' in response.headers["content-disposition"]
    assert "Made with HTML Decks" in response.text

    clean = client.get(f"/api/sessions/{sid}/export", params={"watermark": "false"})
    assert "Made with HTML Decks" not in clean.text


def test_websocket_editing(client):
    """Test live edits over the websocket."""
    sid = create_session(client)["session_id"]

    with client.websocket_connect(f"/ws/sessions/{sid}") as ws:
        deck_message = ws.receive_json()
        assert deck_message["type"] == "deck"
        assert 'contenteditable="true"' in deck_message["slides"][0]
        assert ws.receive_json()["type"] == "counter"

        ws.send_text("ping")
        assert ws.receive_text() == "pong"

        ws.send_json({"event": "input", "slide_index": 0, "field": "title", "text": "Hello"})
        assert ws.receive_json() == {"type": "result", "event": "input", "value": None}

        ws.send_json({"event": "blur"})
        thumbnail = ws.receive_json()
        assert thumbnail["type"] == "thumbnail"
        assert "Hello" in thumbnail["html"]
        assert ws.receive_json()["type"] == "result"

        ws.send_json({"event": "key", "slide_index": 1, "field": "content.0", "key": "Enter", "text": "Split here"})
        assert ws.receive_json()["type"] == "slide"
        assert ws.receive_json()["type"] == "thumbnail"
        assert ws.receive_json() == {"type": "focus", "slide_index": 1, "field": "content.1"}
        assert ws.receive_json() == {"type": "result", "event": "key", "value": True}

        ws.send_json({"event": "focus", "slide_index": 0, "field": "bogus"})
        assert ws.receive_json()["type"] == "error"

    state = client.get(f"/api/sessions/{sid}").json()
    assert state["deck"]["slides"][0]["title"] == "Hello"
    assert state["deck"]["slides"][1]["content"].startswith("Split here\n\n")
