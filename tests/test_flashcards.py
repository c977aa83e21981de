"""
Tests for /flashcards and the comment routes nested under it.
"""

from conftest import auth

CARD = {"sideOneText": "Front", "sideTwoText": "Back", "sideOneImageUrl": "", "sideTwoImageUrl": ""}


def test_get_flashcard_in_public_set(client, ids):
    resp = client.get(f"/flashcards/{ids['card1']}", headers=auth("u2"))
    assert resp.status_code == 200
    assert resp.json()["flashcard"] == {
        "id": ids["card1"],
        "sideOneText": "Term1",
        "sideTwoText": "Definition1",
        "sideOneImageUrl": "",
        "sideTwoImageUrl": "",
        "setId": ids["set1"],
    }


def test_get_flashcard_in_hidden_set(client, ids):
    assert client.get(f"/flashcards/{ids['card2']}", headers=auth("u2")).status_code == 401
    assert client.get(f"/flashcards/{ids['card2']}", headers=auth("u1")).status_code == 200


def test_add_flashcard_to_own_set(client, ids):
    resp = client.post("/flashcards", json={**CARD, "setId": ids["set1"]}, headers=auth("u1"))
    assert resp.status_code == 201
    assert resp.json()["flashcard"]["sideOneText"] == "Front"


def test_add_flashcard_to_other_users_set(client, ids):
    resp = client.post("/flashcards", json={**CARD, "setId": ids["set1"]}, headers=auth("u2"))
    assert resp.status_code == 401


def test_add_flashcard_to_missing_set(client):
    resp = client.post("/flashcards", json={**CARD, "setId": 9999}, headers=auth("u1"))
    assert resp.status_code == 404


def test_add_flashcard_all_sides_empty(client, ids):
    empty = {"sideOneText": "", "sideTwoText": "", "sideOneImageUrl": "", "sideTwoImageUrl": "", "setId": ids["set1"]}
    resp = client.post("/flashcards", json=empty, headers=auth("u1"))
    assert resp.status_code == 400


def test_add_flashcard_image_can_stand_in_for_text(client, ids):
    card = {"sideOneText": "Dog", "sideTwoImageUrl": "https://img.example.org/dog.png", "setId": ids["set1"]}
    resp = client.post("/flashcards", json=card, headers=auth("u1"))
    assert resp.status_code == 201
    body = resp.json()["flashcard"]
    assert body["sideTwoText"] == ""
    assert body["sideTwoImageUrl"] == "https://img.example.org/dog.png"


def test_add_flashcard_with_one_side_missing(client, ids):
    resp = client.post("/flashcards", json={"sideOneText": "only front", "setId": ids["set1"]}, headers=auth("u1"))
    assert resp.status_code == 400


def test_update_flashcard_resolves_set_from_card(client, ids):
    resp = client.patch(f"/flashcards/{ids['card1']}", json=CARD, headers=auth("u1"))
    assert resp.status_code == 201
    assert resp.json()["flashcard"]["sideTwoText"] == "Back"

    resp = client.patch(f"/flashcards/{ids['card1']}", json=CARD, headers=auth("u2"))
    assert resp.status_code == 401


def test_update_flashcard_ignores_set_id_in_body(client, ids):
    # u2 owns Set3 but that does not grant access to a card in Set1
    resp = client.patch(f"/flashcards/{ids['card1']}", json={**CARD, "setId": ids["set3"]}, headers=auth("u2"))
    assert resp.status_code == 401


def test_delete_flashcard(client, ids):
    assert client.delete(f"/flashcards/{ids['card1']}", headers=auth("u2")).status_code == 401
    resp = client.delete(f"/flashcards/{ids['card1']}", headers=auth("u1"))
    assert resp.status_code == 200
    assert resp.json() == {"deleted": ids["card1"]}


def test_delete_missing_flashcard(client):
    assert client.delete("/flashcards/9999", headers=auth("u1")).status_code == 404


# ---------- comments ----------

def test_get_comments(client, ids):
    resp = client.get(f"/flashcards/{ids['card1']}/comments", headers=auth("u3"))
    assert resp.status_code == 200
    comments = resp.json()["comments"]
    assert len(comments) == 1
    assert comments[0]["postedBy"] == "u2"
    assert comments[0]["upvotes"] == 0


def test_comments_on_hidden_set(client, ids):
    assert client.get(f"/flashcards/{ids['card2']}/comments", headers=auth("u2")).status_code == 401
    resp = client.post(f"/flashcards/{ids['card2']}/comments", json={"text": "hi"}, headers=auth("u2"))
    assert resp.status_code == 401


def test_add_comment(client, ids):
    resp = client.post(f"/flashcards/{ids['card1']}/comments", json={"text": "A comment for testing"}, headers=auth("u3"))
    assert resp.status_code == 201
    comment = resp.json()["comment"]
    assert comment["text"] == "A comment for testing"
    assert comment["postedBy"] == "u3"
    assert comment["flashcardId"] == ids["card1"]


def test_add_comment_requires_login(client, ids):
    resp = client.post(f"/flashcards/{ids['card1']}/comments", json={"text": "hi"})
    assert resp.status_code == 401


def test_only_comment_author_can_edit(client, ids):
    # u1 owns the set and the flashcard, but u2 wrote the comment
    resp = client.patch(f"/flashcards/comments/{ids['comment']}", json={"text": "edited"}, headers=auth("u1"))
    assert resp.status_code == 401

    resp = client.patch(f"/flashcards/comments/{ids['comment']}", json={"text": "edited"}, headers=auth("u2"))
    assert resp.status_code == 201
    assert resp.json()["comment"]["text"] == "edited"


def test_only_comment_author_can_delete(client, ids):
    assert client.delete(f"/flashcards/comments/{ids['comment']}", headers=auth("u1")).status_code == 401
    resp = client.delete(f"/flashcards/comments/{ids['comment']}", headers=auth("u2"))
    assert resp.status_code == 200
    assert resp.json() == {"deleted": ids["comment"]}


def test_edit_missing_comment(client):
    resp = client.patch("/flashcards/comments/9999", json={"text": "x"}, headers=auth("u1"))
    assert resp.status_code == 404


def test_upvotes_accumulate(client, ids):
    for expected in range(1, 4):
        resp = client.post(f"/flashcards/comments/{ids['comment']}/upvote", headers=auth("u3"))
        assert resp.status_code == 200
        assert resp.json() == {"upvotes": expected}

    comments = client.get(f"/flashcards/{ids['card1']}/comments", headers=auth("u3")).json()["comments"]
    assert comments[0]["upvotes"] == 3
    assert comments[0]["downvotes"] == 0


def test_downvotes_do_not_touch_upvotes(client, ids):
    client.post(f"/flashcards/comments/{ids['comment']}/upvote", headers=auth("u1"))
    resp = client.post(f"/flashcards/comments/{ids['comment']}/downvote", headers=auth("u1"))
    assert resp.json() == {"downvotes": 1}

    comments = client.get(f"/flashcards/{ids['card1']}/comments", headers=auth("u1")).json()["comments"]
    assert comments[0]["upvotes"] == 1
    assert comments[0]["downvotes"] == 1


def test_vote_requires_login(client, ids):
    assert client.post(f"/flashcards/comments/{ids['comment']}/upvote").status_code == 401


def test_vote_on_missing_comment(client):
    assert client.post("/flashcards/comments/9999/downvote", headers=auth("u1")).status_code == 404
