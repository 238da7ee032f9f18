"""Tests for the /api/map and /api/companies endpoints."""

import pytest


@pytest.mark.unit
class TestMarkers:

    def test_all_markers_on_screen(self, client):
        resp = client.get("/api/map/markers", params={"width": 360, "height": 180})
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 6
        assert data["zoom"] == 1.0
        assert all(m["on_screen"] for m in data["markers"])

    def test_projected_position(self, client):
        resp = client.get("/api/map/markers", params={"width": 360, "height": 180, "search": "bhp"})
        (marker,) = resp.json()["markers"]
        assert marker["deposit_id"] == 2
        assert marker["x"] == pytest.approx(110.92)
        assert marker["y"] == pytest.approx(114.237)
        assert marker["color"] == "#B87333"

    def test_resource_filter_and_selection(self, client):
        resp = client.get(
            "/api/map/markers",
            params={"width": 360, "height": 180, "resource": "Silver", "selected": 6},
        )
        markers = resp.json()["markers"]
        assert [m["deposit_id"] for m in markers] == [4, 6]
        assert [m["selected"] for m in markers] == [False, True]
        assert markers[1]["scale"] == 1.5

    def test_zoom_out_of_range(self, client):
        resp = client.get("/api/map/markers", params={"zoom": 6})
        assert resp.status_code == 422

    def test_pan_moves_markers(self, client):
        base = client.get("/api/map/markers", params={"width": 360, "height": 180}).json()
        panned = client.get(
            "/api/map/markers", params={"width": 360, "height": 180, "pan_x": 10}
        ).json()
        assert panned["markers"][0]["x"] == pytest.approx(base["markers"][0]["x"] - 10)


@pytest.mark.unit
class TestLegend:

    def test_legend(self, client):
        data = client.get("/api/map/legend").json()
        assert [e["resource"] for e in data["entries"]] == ["Gold", "Copper", "Silver", "Iron Ore"]
        assert data["entries"][0]["color"] == "#FFD700"
        assert data["default_color"] == "#666666"

    def test_legend_empty(self, empty_client):
        assert empty_client.get("/api/map/legend").json()["entries"] == []


@pytest.mark.unit
class TestCompanies:

    def test_companies(self, client):
        data = client.get("/api/companies").json()
        assert len(data) == 6
        assert data[0] == {"company_name": "BHP", "deposits": 1}

    def test_companies_grouped(self, client):
        client.post("/api/deposits", json={
            "company_name": "BHP", "project_name": "Olympic Dam", "resource": "Copper",
            "latitude": -30.44, "longitude": 136.88, "country": "Australia",
        })
        data = {c["company_name"]: c["deposits"] for c in client.get("/api/companies").json()}
        assert data["BHP"] == 2
