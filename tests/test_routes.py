"""Tests for the block display HTTP routes."""


def summary(block, label):
    for field in block["summary"]:
        if field["label"] == label:
            return field["value"]
    return None


def detail(entry, label):
    for field in entry["details"]:
        if field["label"] == label:
            return field["value"]
    return None


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_block_types(client):
    resp = client.get("/blocks/types")
    assert resp.status_code == 200
    types = resp.json()
    assert {"block_type": "tabata", "variant": "circuit", "label": "TABATA"} in types
    assert all(t["variant"] in {"straight_sets", "superset", "drop_set", "circuit", "density"} for t in types)


def test_interpret_block(client, superset_block):
    resp = client.post("/blocks/interpret", json={"block": superset_block, "index": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["position_label"] == "Block 3"
    assert body["variant"] == "superset"
    assert body["type_label"] == "SUPERSETS"
    assert [e["heading"] for e in body["breakdown"]] == ["Exercise A", "Exercise B"]
    assert detail(body["breakdown"][0], "Reps") == "8-10"
    assert summary(body, "Rest between sets") == "90s"


def test_interpret_empty_block(client):
    resp = client.post("/blocks/interpret", json={"block": {}})
    assert resp.status_code == 200
    body = resp.json()
    assert body["variant"] == "straight_sets"
    assert body["title"] == "Straight Sets"


def test_interpret_block_rejects_negative_index(client):
    resp = client.post("/blocks/interpret", json={"block": {}, "index": -1})
    assert resp.status_code == 422


def test_interpret_batch(client, emom_block, drop_set_block):
    resp = client.post("/blocks/interpret/batch", json={"blocks": [emom_block, drop_set_block]})
    assert resp.status_code == 200
    body = resp.json()
    assert [b["position_label"] for b in body] == ["Block 1", "Block 2"]
    assert summary(body[0], "Rest between sets") == "20s"
    assert body[1]["variant"] == "drop_set"
    assert len(body[1]["breakdown"]) == 2


def test_display_workout(client, persisted_block_rows):
    resp = client.post("/workouts/display", json=persisted_block_rows)
    assert resp.status_code == 200
    straight, superset = resp.json()

    assert straight["block_id"] == "blk-1"
    assert straight["title"] == "Back Squat"
    assert straight["notes"] == "Brace hard"
    squat = straight["breakdown"][0]
    assert detail(squat, "Sets") == "4"
    assert detail(squat, "Reps") == "5"
    assert detail(squat, "Rest") == "180s"
    assert detail(squat, "Weight") == "120 kg"

    assert superset["position_label"] == "Block 2"
    assert superset["title"] == "Accessory"
    assert superset["notes"] is None
    entry_a, entry_b = superset["breakdown"]
    assert entry_a["name"] == "Dumbbell Press"
    assert detail(entry_a, "Reps") == "8"
    assert detail(entry_b, "Reps") == "12"
    assert detail(entry_b, "Sets") == "3"
    assert summary(superset, "Rest between sets") == "60s"


def test_display_workout_empty(client):
    resp = client.post("/workouts/display", json={})
    assert resp.status_code == 200
    assert resp.json() == []


def test_display_workout_unhashable_block_type(client):
    resp = client.post("/workouts/display", json={
        "blocks": [{"id": "odd", "block_type": ["superset"], "exercises": [{"id": "r-1", "sets": 3}]}],
    })
    assert resp.status_code == 200
    (block,) = resp.json()
    assert block["variant"] == "straight_sets"
    assert block["block_type"] == "straight_set"
    assert detail(block["breakdown"][0], "Sets") == "3"
