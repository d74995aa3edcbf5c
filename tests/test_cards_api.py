import pytest


SEED = [
    {"id": 1, "suit": "Hearts", "value": "Ace"},
    {"id": 2, "suit": "Spades", "value": "King"},
    {"id": 3, "suit": "Diamonds", "value": "Queen"},
]
REQUIRED = {"message": "Suit and value are required properties."}
NOT_FOUND = {"message": "Card not found"}


# --- GET /cards ---

def test_list_cards_returns_seed(client):
    resp = client.get("/cards")
    assert resp.status_code == 200
    assert resp.json() == SEED


def test_list_cards_reflects_create_and_delete_order(client):
    client.post("/cards", json={"suit": "Clubs", "value": "2"})
    client.delete("/cards/1")
    resp = client.get("/cards")
    assert [c["id"] for c in resp.json()] == [2, 3, 4]


# --- GET /cards/{id} ---

def test_get_card(client):
    resp = client.get("/cards/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "suit": "Spades", "value": "King"}


def test_get_missing_card(client):
    resp = client.get("/cards/999")
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND


@pytest.mark.parametrize("raw_id", ["abc", "1.5", "1a", "%20"])
def test_get_non_numeric_id_is_not_found(client, raw_id):
    resp = client.get(f"/cards/{raw_id}")
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND


def test_id_too_long_to_convert_is_not_found(client):
    huge_id = "9" * 5000
    for resp in (client.get(f"/cards/{huge_id}"), client.delete(f"/cards/{huge_id}")):
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND
    assert client.get("/cards").json() == SEED


# --- POST /cards ---

def test_create_card(client):
    resp = client.post("/cards", json={"suit": "Clubs", "value": "2"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 4, "suit": "Clubs", "value": "2"}


def test_create_ignores_client_supplied_id(client):
    resp = client.post("/cards", json={"id": 1, "suit": "Clubs", "value": "2", "extra": True})
    assert resp.status_code == 201
    assert resp.json() == {"id": 4, "suit": "Clubs", "value": "2"}


def test_created_ids_strictly_increase(client):
    ids = [client.post("/cards", json={"suit": "Clubs", "value": str(v)}).json()["id"] for v in range(2, 8)]
    assert ids == sorted(set(ids))
    assert ids[0] == 4


@pytest.mark.parametrize(
    "body",
    [
        {"suit": "Clubs"},
        {"value": "2"},
        {},
        {"suit": "", "value": "2"},
        {"suit": "Clubs", "value": ""},
        {"suit": None, "value": "2"},
        {"suit": "Clubs", "value": 2},
        ["Clubs", "2"],
    ],
)
def test_create_with_invalid_fields_is_rejected(client, body):
    resp = client.post("/cards", json=body)
    assert resp.status_code == 400
    assert resp.json() == REQUIRED
    assert client.get("/cards").json() == SEED


def test_create_without_body_is_rejected(client):
    resp = client.post("/cards")
    assert resp.status_code == 400
    assert resp.json() == REQUIRED


def test_create_with_malformed_json(client):
    resp = client.post("/cards", content=b'{"suit": "Clubs",', headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Malformed JSON body."}
    assert len(client.get("/cards").json()) == 3


def test_create_with_body_that_is_not_utf8(client):
    resp = client.post("/cards", content=b'{"suit": "\xff", "value": "2"}', headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Malformed JSON body."}
    assert client.get("/cards").json() == SEED


def test_rejected_create_does_not_consume_an_id(client):
    client.post("/cards", json={"suit": "Clubs"})
    resp = client.post("/cards", json={"suit": "Clubs", "value": "2"})
    assert resp.json()["id"] == 4


# --- DELETE /cards/{id} ---

def test_delete_card(client):
    resp = client.delete("/cards/3")
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Card with ID 3 removed.",
        "card": {"id": 3, "suit": "Diamonds", "value": "Queen"},
    }
    assert client.get("/cards/3").status_code == 404


def test_delete_missing_card(client):
    resp = client.delete("/cards/42")
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND
    assert client.get("/cards").json() == SEED


def test_delete_non_numeric_id_is_not_found(client):
    resp = client.delete("/cards/ace")
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND


def test_delete_twice(client):
    assert client.delete("/cards/1").status_code == 200
    assert client.delete("/cards/1").json() == NOT_FOUND


# --- round trips and scenario ---

def test_created_card_is_listed_once_and_retrievable(client):
    card = client.post("/cards", json={"suit": "Clubs", "value": "2"}).json()
    listed = client.get("/cards").json()
    assert listed.count(card) == 1
    assert client.get(f"/cards/{card['id']}").json() == card


def test_full_scenario(client):
    resp = client.post("/cards", json={"suit": "Clubs", "value": "2"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 4, "suit": "Clubs", "value": "2"}

    resp = client.get("/cards/4")
    assert resp.status_code == 200
    assert resp.json() == {"id": 4, "suit": "Clubs", "value": "2"}

    resp = client.delete("/cards/4")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Card with ID 4 removed.", "card": {"id": 4, "suit": "Clubs", "value": "2"}}

    resp = client.get("/cards/4")
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND

    resp = client.post("/cards", json={"suit": "Clubs"})
    assert resp.status_code == 400
    assert resp.json() == REQUIRED

    # IDs are never reused.
    assert client.post("/cards", json={"suit": "Hearts", "value": "5"}).json()["id"] == 5


# --- routing and ambient endpoints ---

def test_versioned_prefix_shares_the_store(client):
    client.post("/api/v1/cards", json={"suit": "Clubs", "value": "2"})
    assert client.get("/cards/4").json() == {"id": 4, "suit": "Clubs", "value": "2"}
    assert client.get("/api/v1/cards/4").status_code == 200


def test_unsupported_method_uses_message_body(client):
    resp = client.put("/cards/1", json={"suit": "Clubs", "value": "2"})
    assert resp.status_code == 405
    assert "message" in resp.json()


def test_unknown_path_uses_message_body(client):
    resp = client.get("/decks")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_health(client):
    client.post("/cards", json={"suit": "Clubs", "value": "2"})
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "cards": 4}


def test_apps_do_not_share_state(client):
    from fastapi.testclient import TestClient
    from card_store_api.app.main import create_app

    client.post("/cards", json={"suit": "Clubs", "value": "2"})
    with TestClient(create_app()) as other:
        assert other.get("/cards").json() == SEED
