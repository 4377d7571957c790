# tsplib_parser/tests/test_app.py
import pytest


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_parse_ok(client, examples):
    text = examples["eil7.vrp"].read_text(encoding="utf-8")
    r = client.post("/parse", json={"text": text})
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["status"] == "ok"
    inst = out["instance"]
    assert inst["kind"] == "CVRP"
    assert inst["dimension"] == 7
    assert inst["capacity"] == 100
    assert inst["depots"] == [1]
    assert len(inst["node_coords"]) == 7


def test_parse_missing_name_is_400(client, without):
    r = client.post("/parse", json={"text": without("NAME")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing entry: NAME"


def test_parse_bad_token_is_400(client, minimal_text):
    r = client.post("/parse", json={"text": minimal_text.replace("GEO", "BOGUS")})
    assert r.status_code == 400
    assert "EDGE_WEIGHT_TYPE" in r.json()["detail"]


def test_parse_request_needs_text(client):
    r = client.post("/parse", json={})
    assert r.status_code == 422


def test_header_is_lenient(client):
    text = "NAME: h\nTYPE: WHATEVER\nDIMENSION: 12\nEDGE_WEIGHT_TYPE: EUC_2D\nNODE_COORD_SECTION\n1 0 0\n"
    r = client.post("/header", json={"text": text})
    assert r.status_code == 200, r.text
    header = r.json()["header"]
    assert header["name"] == "h"
    assert header["kind"] == "UNDEFINED"
    assert header["dimension"] == 12
    assert header["weight_kind"] == "EUC_2D"


def test_weights(client, examples):
    text = examples["square4.tsp"].read_text(encoding="utf-8")
    r = client.post("/weights", json={"text": text, "pairs": [[1, 3], [2, 3], [1, 1]]})
    assert r.status_code == 200, r.text
    assert r.json()["weights"] == pytest.approx([5.0, 4.0, 0.0])


def test_weights_unknown_node(client, examples):
    text = examples["square4.tsp"].read_text(encoding="utf-8")
    r = client.post("/weights", json={"text": text, "pairs": [[1, 9]]})
    assert r.status_code == 200
    assert r.json()["weights"] == [0.0]

    r = client.post("/weights", json={"text": text, "pairs": [[1, 9]], "strict": True})
    assert r.status_code == 404


def test_weights_explicit_out_of_range(client, examples):
    text = examples["upper5.tsp"].read_text(encoding="utf-8")
    r = client.post("/weights", json={"text": text, "pairs": [[0, 1], [0, 5]]})
    assert r.status_code == 400
    r = client.post("/weights", json={"text": text, "pairs": [[0, 5]], "strict": True})
    assert r.status_code == 404
