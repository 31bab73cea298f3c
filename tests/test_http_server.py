"""Tests for the FastAPI surface."""

import pytest
from fastapi.testclient import TestClient

from confidential_grid.http_server import app, initialize_server
from confidential_grid.main import GameEngine
from confidential_grid.service.crypto_ops import MockBackend
from confidential_grid.service.rules import StatusCode

from conftest import ALICE, BOB


@pytest.fixture
def client(tmp_path):
    engine = GameEngine(backend=MockBackend(), log_dir=str(tmp_path / "logs"))
    initialize_server(engine.store, engine.encryption, engine.decryption)
    return TestClient(app)


def as_player(identity):
    return {"X-Identity": identity}


def place(client, identity, position, building_type):
    handle = client.post(
        "/encrypt_input", json={"value": building_type}, headers=as_player(identity)
    ).json()["handle"]
    return client.post(
        "/place_building",
        json={"position": position, "handle": handle},
        headers=as_player(identity),
    )


def decrypt(client, identity, handle):
    response = client.post("/user_decrypt", json={"handle": handle}, headers=as_player(identity))
    assert response.status_code == 200
    return response.json()["value"]


class TestJoinEndpoint:
    """POST /join and GET /joined."""

    def test_join(self, client):
        response = client.post("/join", headers=as_player(ALICE))
        assert response.status_code == 200
        assert client.get(f"/joined/{ALICE}").json()["joined"] is True
        assert client.get(f"/joined/{BOB}").json()["joined"] is False

    def test_double_join_conflicts(self, client):
        client.post("/join", headers=as_player(ALICE))
        response = client.post("/join", headers=as_player(ALICE))
        assert response.status_code == 409
        assert response.json()["detail"]["code"] == "ALREADY_JOINED"

    def test_missing_identity(self, client):
        assert client.post("/join").status_code == 401


class TestPlacementEndpoint:
    """POST /place_building and the read surface."""

    def test_scenario(self, client):
        client.post("/join", headers=as_player(ALICE))

        result = place(client, ALICE, 4, 2).json()
        assert decrypt(client, ALICE, result["tile"]["handle"]) == 2
        assert decrypt(client, ALICE, result["balance"]["handle"]) == 9_800
        assert decrypt(client, ALICE, result["status"]["handle"]) == StatusCode.SUCCESS

        place(client, ALICE, 4, 5)
        status = client.get(f"/status/{ALICE}").json()["handle"]
        assert decrypt(client, ALICE, status) == StatusCode.INVALID_BUILDING

        place(client, ALICE, 4, 3)
        status = client.get(f"/status/{ALICE}").json()["handle"]
        tile = client.get(f"/tile/{ALICE}/4").json()["handle"]
        balance = client.get(f"/balance/{ALICE}").json()["handle"]
        assert decrypt(client, ALICE, status) == StatusCode.TILE_TAKEN
        assert decrypt(client, ALICE, tile) == 2
        assert decrypt(client, ALICE, balance) == 9_800

    def test_board_returns_nine_handles(self, client):
        client.post("/join", headers=as_player(ALICE))
        tiles = client.get(f"/board/{ALICE}").json()["tiles"]
        assert len(tiles) == 9
        assert all(tile["kind"] == "euint8" for tile in tiles)
        assert [decrypt(client, ALICE, t["handle"]) for t in tiles] == [0] * 9

    def test_not_joined(self, client):
        response = place(client, ALICE, 0, 1)
        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "NOT_JOINED"

    def test_invalid_position(self, client):
        client.post("/join", headers=as_player(ALICE))
        response = place(client, ALICE, 9, 1)
        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "INVALID_POSITION"
        assert client.get(f"/tile/{ALICE}/9").status_code == 422

    def test_foreign_input_is_forbidden(self, client):
        client.post("/join", headers=as_player(ALICE))
        handle = client.post(
            "/encrypt_input", json={"value": 1}, headers=as_player(BOB)
        ).json()["handle"]
        response = client.post(
            "/place_building", json={"position": 0, "handle": handle}, headers=as_player(ALICE)
        )
        assert response.status_code == 403

    def test_stored_handle_is_not_an_input(self, client):
        client.post("/join", headers=as_player(ALICE))
        for path in (f"/balance/{ALICE}", f"/tile/{ALICE}/1", f"/status/{ALICE}"):
            handle = client.get(path).json()["handle"]
            response = client.post(
                "/place_building", json={"position": 0, "handle": handle}, headers=as_player(ALICE)
            )
            assert response.status_code == 422
            assert response.json()["detail"]["code"] == "INVALID_INPUT"

        balance = client.get(f"/balance/{ALICE}").json()["handle"]
        assert decrypt(client, ALICE, balance) == 10_000

    def test_input_handle_is_single_use(self, client):
        client.post("/join", headers=as_player(ALICE))
        handle = client.post(
            "/encrypt_input", json={"value": 1}, headers=as_player(ALICE)
        ).json()["handle"]
        first = client.post(
            "/place_building", json={"position": 0, "handle": handle}, headers=as_player(ALICE)
        )
        second = client.post(
            "/place_building", json={"position": 1, "handle": handle}, headers=as_player(ALICE)
        )
        assert first.status_code == 200
        assert second.status_code == 404

    def test_unknown_input_handle(self, client):
        client.post("/join", headers=as_player(ALICE))
        response = client.post(
            "/place_building", json={"position": 0, "handle": "0x00"}, headers=as_player(ALICE)
        )
        assert response.status_code == 404

    def test_missing_field(self, client):
        client.post("/join", headers=as_player(ALICE))
        response = client.post("/place_building", json={"position": 0}, headers=as_player(ALICE))
        assert response.status_code == 422


class TestDecryptEndpoint:
    """POST /user_decrypt and POST /encrypt_input validation."""

    def test_other_player_cannot_decrypt(self, client):
        client.post("/join", headers=as_player(ALICE))
        handle = client.get(f"/balance/{ALICE}").json()["handle"]
        response = client.post("/user_decrypt", json={"handle": handle}, headers=as_player(BOB))
        assert response.status_code == 403

    def test_encrypt_input_range(self, client):
        response = client.post("/encrypt_input", json={"value": 256}, headers=as_player(ALICE))
        assert response.status_code == 422

    @pytest.mark.parametrize("kind", ["euint64", "ebool"])
    def test_encrypt_input_only_issues_euint8(self, client, kind):
        response = client.post(
            "/encrypt_input", json={"value": 1, "kind": kind}, headers=as_player(ALICE)
        )
        assert response.status_code == 422

    def test_encrypt_input_accepts_explicit_euint8(self, client):
        response = client.post(
            "/encrypt_input", json={"value": 4, "kind": "euint8"}, headers=as_player(ALICE)
        )
        assert response.status_code == 200
        assert response.json()["kind"] == "euint8"

    def test_responses_carry_no_plaintext(self, client):
        client.post("/join", headers=as_player(ALICE))
        body = client.get(f"/balance/{ALICE}").json()
        assert set(body) == {"handle", "kind"}
