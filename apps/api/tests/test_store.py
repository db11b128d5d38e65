import dataclasses
import json

from fastapi.testclient import TestClient

from roster.core.config import get_settings
from roster.domain.models import RosterData
from roster.main import create_app
from roster.services.store import JsonFileStore, MemoryStore, get_store


def test_missing_file_loads_empty_store(tmp_path):
    store = JsonFileStore(tmp_path / "data.json")
    outcome = store.read()
    assert outcome.ok
    assert outcome.data == RosterData()
    assert store.load().model_dump() == {"users": {}, "classes": {}}


def test_save_writes_pretty_printed_json(tmp_path):
    path = tmp_path / "nested" / "data.json"
    store = JsonFileStore(path)

    data = RosterData(users={"ana": "pw"}, classes={"Math101": ["Alice", "Bob"]})
    assert store.save(data).ok

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"users": {"ana": "pw"}, "classes": {"Math101": ["Alice", "Bob"]}}
    assert '\n  "users"' in text
    assert store.load() == data


def test_malformed_file_falls_back_to_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{ definitely not json", encoding="utf-8")
    store = JsonFileStore(path)

    outcome = store.read()
    assert not outcome.ok
    assert outcome.error
    assert store.load() == RosterData()

    # Wrong shape is treated the same as unparseable content
    path.write_text(json.dumps({"users": {"ana": 1}, "classes": []}), encoding="utf-8")
    assert not store.read().ok


def test_undecodable_file_falls_back_to_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_bytes(b'{"users": {"\xff": "x"}, "classes": {}}')
    store = JsonFileStore(path)

    outcome = store.read()
    assert not outcome.ok
    assert outcome.data == RosterData()

    client = _client_for(store, strict=False)
    resp = client.get("/api/classes")
    assert resp.status_code == 200
    assert resp.json() == {}

    client = _client_for(store, strict=True)
    resp = client.get("/api/classes")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Could not read data store"}


def test_save_failure_is_reported_not_raised(tmp_path):
    # A directory in place of the file makes the write fail
    path = tmp_path / "data.json"
    path.mkdir()
    store = JsonFileStore(path)

    outcome = store.save(RosterData(users={"ana": "pw"}))
    assert not outcome.ok
    assert outcome.error


def test_memory_store_keeps_its_own_copy():
    store = MemoryStore(RosterData(classes={"Art": ["Alice"]}))

    loaded = store.load()
    loaded.classes["Art"].append("Bob")
    assert store.load().classes == {"Art": ["Alice"]}

    store.save(loaded)
    loaded.classes["Art"].append("Cara")
    assert store.load().classes == {"Art": ["Alice", "Bob"]}


def _client_for(store, strict):
    app = create_app()
    settings = dataclasses.replace(get_settings(), strict_persistence=strict)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


def test_api_persists_to_file(tmp_path):
    path = tmp_path / "data.json"
    client = _client_for(JsonFileStore(path), strict=False)

    client.post("/api/register", json={"username": "ana", "password": "pw"})
    client.post("/api/classes", json={"className": "Math101"})
    client.post("/api/classes/Math101/students", json={"studentName": "Alice"})

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "users": {"ana": "pw"},
        "classes": {"Math101": ["Alice"]},
    }

    # A fresh accessor over the same file sees the same state
    other = _client_for(JsonFileStore(path), strict=False)
    assert other.get("/api/classes").json() == {"Math101": ["Alice"]}
    assert other.post("/api/login", json={"username": "ana", "password": "pw"}).status_code == 200


def test_lenient_mode_replaces_unreadable_store(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("garbage", encoding="utf-8")
    client = _client_for(JsonFileStore(path), strict=False)

    assert client.get("/api/classes").json() == {}
    assert client.post("/api/classes", json={"className": "Bio"}).status_code == 200
    assert json.loads(path.read_text(encoding="utf-8"))["classes"] == {"Bio": []}


def test_lenient_mode_reports_success_when_save_fails(tmp_path):
    path = tmp_path / "data.json"
    path.mkdir()
    client = _client_for(JsonFileStore(path), strict=False)

    resp = client.post("/api/classes", json={"className": "Bio"})
    assert resp.status_code == 200
    assert client.get("/api/classes").json() == {}


def test_strict_mode_surfaces_persistence_failures(tmp_path):
    unreadable = tmp_path / "bad.json"
    unreadable.write_text("garbage", encoding="utf-8")
    client = _client_for(JsonFileStore(unreadable), strict=True)

    resp = client.get("/api/classes")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Could not read data store"}
    assert unreadable.read_text(encoding="utf-8") == "garbage"

    # Parent is a regular file: nothing to read yet, and the write cannot happen
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    client = _client_for(JsonFileStore(blocker / "data.json"), strict=True)

    resp = client.post("/api/register", json={"username": "ana", "password": "pw"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Could not save data store"}
