from fastapi.testclient import TestClient

from billing import auth
from billing.config import IdentityRecord, load_identities, save_identities
from billing.main import app


def test_identities_round_trip(tmp_path):
    path = tmp_path / "identities.json"
    save_identities([IdentityRecord(token="t1", name="ops", is_admin=True)], path)

    loaded = load_identities(path)
    assert loaded == [IdentityRecord(token="t1", name="ops", is_admin=True)]


def test_missing_or_corrupt_registry_is_empty(tmp_path):
    assert load_identities(tmp_path / "absent.json") == []

    corrupt = tmp_path / "identities.json"
    corrupt.write_text("{not json")
    assert load_identities(corrupt) == []

    corrupt.write_text('[{"name": "no-token"}]')
    assert load_identities(corrupt) == []

    corrupt.write_text('[{"token": "t", "name": "ops", "is_admin": "sometimes"}]')
    assert load_identities(corrupt) == []


def test_registry_tokens_authenticate(tmp_path, monkeypatch, database):
    path = tmp_path / "identities.json"
    save_identities(
        [
            IdentityRecord(token="admin", name="root", is_admin=True),
            IdentityRecord(token="viewer", name="guest"),
        ],
        path,
    )
    monkeypatch.setattr(auth, "load_identities", lambda: load_identities(path))
    client = TestClient(app)

    viewer = {"Authorization": "Bearer viewer"}
    admin = {"Authorization": "Bearer admin"}
    assert client.get("/api/v1/bills", headers=viewer).status_code == 200
    assert client.post("/api/v1/bills", json={"amount": 1}, headers=viewer).status_code == 403
    assert client.post("/api/v1/bills", json={"amount": 1}, headers=admin).status_code == 201
