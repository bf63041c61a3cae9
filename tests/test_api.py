"""
Tests for Flask API endpoints.

Integration tests that validate the REST API returns correct status
codes, JSON structure and the expected jump parameters.
"""

import pytest

from arcjump.services import JumpRegistry
from arcjump.services.trajectory import TrajectoryService


class TestSharedEndpoints:
    """Test GET /api/services and GET /api/kinds."""

    def test_list_services(self, client):
        resp = client.get("/api/services")
        assert resp.status_code == 200
        data = resp.get_json()
        assert [s["id"] for s in data] == ["trajectory"]
        assert {"method": "POST", "path": "/api/trajectory/resolve"} in data[0]["endpoints"]

    def test_listed_endpoints_are_mounted(self, client):
        """Every advertised endpoint answers; an empty body is a 400, not a 404."""
        for service in client.get("/api/services").get_json():
            for endpoint in service["endpoints"]:
                resp = client.open(endpoint["path"], method=endpoint["method"])
                assert resp.status_code == 400, endpoint["path"]

    def test_list_kinds(self, client):
        resp = client.get("/api/kinds")
        assert resp.status_code == 200
        data = resp.get_json()
        assert [k["name"] for k in data["kinds"]] == [
            "height", "time", "impulse", "gravity"]
        impulse = data["kinds"][2]
        assert impulse["symbol"] == "I"
        assert impulse["order"] == 2
        assert "v" in impulse["aliases"]
        assert data["widths"] == ["f32", "f64"]
        assert data["default_width"] == "f64"

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.get_json()["name"] == "arcjump"


class TestTrajectoryEndpoint:
    """Test POST /api/trajectory."""

    def test_height_time_f32(self, client):
        resp = client.post("/api/trajectory", json={
            "width": "f32", "height": 20, "time": 10,
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["width"] == "f32"
        assert data["trajectory"]["impulse"] == 4.0
        assert abs(data["trajectory"]["gravity"] + 0.4) < 1e-6
        assert data["identities"] == [
            "impulse_from_height_and_time", "gravity_from_height_and_time"]

    def test_default_width_and_aliases(self, client):
        resp = client.post("/api/trajectory", json={"v": 10, "g": -1})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["width"] == "f64"
        assert data["trajectory"]["height"] == 50.0
        assert data["trajectory"]["time"] == 10.0

    def test_null_time_is_422(self, client):
        resp = client.post("/api/trajectory", json={"height": 20, "time": 0})
        assert resp.status_code == 422
        data = resp.get_json()
        assert data["parameter"] == "time"
        assert "cannot be null" in data["error"]

    @pytest.mark.parametrize("payload", [
        {"height": 20},
        {"height": 20, "time": 10, "impulse": 4},
        {"height": 20, "speed": 10},
        {"height": 20, "time": "10"},
        {"height": 20, "time": True},
        {"height": 20, "time": 1e20},
        {"height": 20, "time": 10, "width": "f16"},
        [20, 10],
    ])
    def test_invalid_payload_is_400(self, client, payload):
        resp = client.post("/api/trajectory", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_not_json_is_400(self, client):
        resp = client.post("/api/trajectory", data="height=20",
                           content_type="text/plain")
        assert resp.status_code == 400


class TestResolveEndpoint:
    """Test POST /api/trajectory/resolve."""

    def test_single_output(self, client):
        resp = client.post("/api/trajectory/resolve", json={
            "inputs": {"height": 10, "impulse": 4},
            "output": "gravity",
            "width": "f32",
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert abs(data["value"] + 0.8) < 1e-6
        assert data["output"] == "gravity"
        assert data["identity"] == "gravity_from_height_and_impulse"

    def test_output_equal_to_input_is_400(self, client):
        resp = client.post("/api/trajectory/resolve", json={
            "inputs": {"height": 10, "impulse": 4},
            "output": "height",
        })
        assert resp.status_code == 400
        assert "Invalid parameter combination" in resp.get_json()["error"]

    def test_missing_output_is_400(self, client):
        resp = client.post("/api/trajectory/resolve", json={
            "inputs": {"height": 10, "impulse": 4},
        })
        assert resp.status_code == 400

    def test_null_impulse_is_422(self, client):
        resp = client.post("/api/trajectory/resolve", json={
            "inputs": {"height": 10, "impulse": 0},
            "output": "time",
        })
        assert resp.status_code == 422
        assert resp.get_json()["parameter"] == "impulse"


class TestHorizontalEndpoint:
    """Test POST /api/trajectory/horizontal."""

    def test_time_budget(self, client):
        resp = client.post("/api/trajectory/horizontal", json={
            "speed": 5, "range": 100, "ratio": 0.25, "height": 20,
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["time"] == 10.0
        assert data["ascent_time"] == 5.0
        assert data["descent_time"] == 15.0
        assert data["trajectory"]["impulse"] == 4.0

    def test_optional_fields(self, client):
        resp = client.post("/api/trajectory/horizontal", json={
            "speed": 5, "range": 100,
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert "trajectory" not in data
        assert "ascent_time" not in data

    def test_null_speed_is_422(self, client):
        resp = client.post("/api/trajectory/horizontal", json={
            "speed": 0, "range": 100, "height": 20,
        })
        assert resp.status_code == 422
        assert resp.get_json()["parameter"] == "speed"

    def test_ratio_out_of_range_is_400(self, client):
        resp = client.post("/api/trajectory/horizontal", json={
            "speed": 5, "range": 100, "ratio": 1.5,
        })
        assert resp.status_code == 400

    def test_missing_range_is_400(self, client):
        resp = client.post("/api/trajectory/horizontal", json={"speed": 5})
        assert resp.status_code == 400


class TestJumpRegistry:
    """Service registration."""

    def test_duplicate_id_rejected(self):
        registry = JumpRegistry()
        registry.register(TrajectoryService())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(TrajectoryService())

    def test_lookup(self):
        registry = JumpRegistry()
        service = TrajectoryService()
        registry.register(service)
        assert registry.get("trajectory") is service
        assert registry.get("orbit") is None
        assert registry.services() == [service]
