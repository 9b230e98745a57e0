"""
HTTP tests — shape catalog, one-shot calculation, calculator sessions.
"""

import pytest


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_calculators(client):
    resp = client.get("/api/calculators")
    assert resp.status_code == 200
    shapes = {c["shape"]: c for c in resp.json()["calculators"]}
    assert set(shapes) == {"prism", "cylinder", "tube", "wall_assembly"}
    assert shapes["prism"]["density"]["value"] == 4050.0
    assert shapes["cylinder"]["density"]["unit"] == "kg_per_m3"


def test_list_units(client):
    resp = client.get("/api/calculators/units")
    assert resp.json()["units"] == ["inches", "feet", "yards", "meters", "centimeters"]


def test_calculate_prism(client):
    resp = client.post("/api/calculators/prism/calculate", json={
        "dimensions": {
            "length": {"value": 12, "unit": "inches"},
            "width": {"value": "12", "unit": "inches"},
            "height": {"value": 1, "unit": "feet"},
        },
        "quantity": 1,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["volume"]["cubic_feet"] == pytest.approx(1.0)
    assert data["weight"]["lbs"] == pytest.approx(150.0)


def test_calculate_with_density_override(client):
    resp = client.post("/api/calculators/cylinder/calculate", json={
        "dimensions": {
            "diameter": {"value": 2, "unit": "feet"},
            "height": {"value": 1, "unit": "feet"},
        },
        "density": {"value": 133, "unit": "lb_per_ft3"},
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["weight"]["lbs"] == pytest.approx(3.14159265 * 133)


def test_calculate_legacy_alias(client):
    resp = client.post("/api/calculators/square/calculate", json={
        "dimensions": {k: {"value": 1, "unit": "yards"} for k in ("length", "width", "height")},
    })
    assert resp.status_code == 200
    assert resp.json()["shape"] == "prism"
    assert resp.json()["volume"]["cubic_yards"] == pytest.approx(1.0)


def test_calculate_unknown_shape_404(client):
    resp = client.post("/api/calculators/pyramid/calculate", json={"dimensions": {}})
    assert resp.status_code == 404


def test_calculate_invalid_input_422(client):
    resp = client.post("/api/calculators/tube/calculate", json={
        "dimensions": {
            "outer_diameter": {"value": "abc", "unit": "feet"},
            "inner_diameter": {"value": 1, "unit": "feet"},
            "depth": {"value": 1, "unit": "feet"},
        },
    })
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "outer_diameter"


def test_calculate_bad_quantity_422(client):
    resp = client.post("/api/calculators/prism/calculate", json={
        "dimensions": {k: {"value": 1} for k in ("length", "width", "height")},
        "quantity": "1.5",
    })
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "quantity"


def test_session_flow(client):
    resp = client.post("/api/calculators/sessions", json={"shape": "prism"})
    assert resp.status_code == 200
    session = resp.json()
    session_id = session["session_id"]
    assert session["state"] == "empty"
    assert session["result"] is None

    resp = client.patch(f"/api/calculators/sessions/{session_id}", json={
        "dimensions": {
            "length": {"value": 12},
            "width": {"value": 12},
            "height": {"value": 12},
        },
        "quantity": 2,
    })
    assert resp.status_code == 200
    assert resp.json()["state"] == "editing"

    resp = client.post(f"/api/calculators/sessions/{session_id}/calculate")
    data = resp.json()
    assert data["state"] == "computed"
    assert data["result"]["volume"]["cubic_feet"] == pytest.approx(2.0)

    # Editing throws the result away
    resp = client.patch(f"/api/calculators/sessions/{session_id}", json={
        "dimensions": {"height": {"unit": "feet"}},
    })
    assert resp.json()["state"] == "editing"
    assert resp.json()["result"] is None

    resp = client.get(f"/api/calculators/sessions/{session_id}")
    assert resp.json()["fields"]["height"] == {"value": 12, "unit": "feet"}


def test_session_invalid_input_keeps_result_null(client):
    session_id = client.post("/api/calculators/sessions", json={"shape": "cylinder"}).json()["session_id"]
    client.patch(f"/api/calculators/sessions/{session_id}", json={
        "dimensions": {"diameter": {"value": "two"}},
    })
    data = client.post(f"/api/calculators/sessions/{session_id}/calculate").json()
    assert data["result"] is None
    assert data["error"]["field"] == "diameter"


def test_session_bad_unit_422(client):
    session_id = client.post("/api/calculators/sessions", json={"shape": "tube"}).json()["session_id"]
    resp = client.patch(f"/api/calculators/sessions/{session_id}", json={
        "dimensions": {"depth": {"value": 1, "unit": "cubits"}},
    })
    assert resp.status_code == 422


def test_session_clear_and_close(client):
    session_id = client.post("/api/calculators/sessions", json={"shape": "wall_assembly"}).json()["session_id"]
    client.patch(f"/api/calculators/sessions/{session_id}", json={"quantity": 4})
    data = client.post(f"/api/calculators/sessions/{session_id}/clear").json()
    assert data["state"] == "empty"
    assert data["fields"]["quantity"] == 1

    assert client.delete(f"/api/calculators/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/calculators/sessions/{session_id}").status_code == 404


def test_create_session_unknown_shape_404(client):
    resp = client.post("/api/calculators/sessions", json={"shape": "pyramid"})
    assert resp.status_code == 404


@pytest.mark.parametrize("value", [-150, 0])
def test_calculate_rejects_non_positive_density(client, value):
    resp = client.post("/api/calculators/prism/calculate", json={
        "dimensions": {k: {"value": 1, "unit": "feet"} for k in ("length", "width", "height")},
        "density": {"value": value, "unit": "lb_per_ft3"},
    })
    assert resp.status_code == 422


def test_create_session_rejects_negative_density(client):
    resp = client.post("/api/calculators/sessions", json={
        "shape": "tube",
        "density": {"value": -2400, "unit": "kg_per_m3"},
    })
    assert resp.status_code == 422


def test_failed_patch_leaves_session_unchanged(client):
    session_id = client.post("/api/calculators/sessions", json={"shape": "prism"}).json()["session_id"]
    client.patch(f"/api/calculators/sessions/{session_id}", json={
        "dimensions": {k: {"value": 12} for k in ("length", "width", "height")},
    })
    computed = client.post(f"/api/calculators/sessions/{session_id}/calculate").json()
    assert computed["state"] == "computed"

    resp = client.patch(f"/api/calculators/sessions/{session_id}", json={
        "dimensions": {"length": {"value": 99}, "diameter": {"value": 3}},
    })
    assert resp.status_code == 422

    data = client.get(f"/api/calculators/sessions/{session_id}").json()
    assert data["state"] == "computed"
    assert data["fields"]["length"]["value"] == 12
    assert data["result"] == computed["result"]


def test_sessions_capped_oldest_dropped(client, monkeypatch):
    from precast.config import settings
    monkeypatch.setattr(settings, "MAX_SESSIONS", 2)

    ids = [client.post("/api/calculators/sessions", json={"shape": "prism"}).json()["session_id"]
           for _ in range(3)]

    assert client.get(f"/api/calculators/sessions/{ids[0]}").status_code == 404
    assert client.get(f"/api/calculators/sessions/{ids[1]}").status_code == 200
    assert client.get(f"/api/calculators/sessions/{ids[2]}").status_code == 200
