"""Tests for arctext FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from arctext.main import app
from arctext.sizes import SENTINEL_SIZE

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["service"] == "arctext"

    def test_health_includes_version(self):
        resp = client.get("/health")
        assert "version" in resp.json()


class TestLayoutEndpoint:
    def test_layout_concrete_scenario(self):
        resp = client.post(
            "/layout",
            json={
                "text": "AB",
                "radius": 100,
                "sizes": [{"width": 10, "height": 20}, {"width": 10, "height": 20}],
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        angles = [p["angle"] for p in data["placements"]]
        assert angles == [pytest.approx(-0.05), pytest.approx(0.05)]
        assert [p["radial_offset"] for p in data["placements"]] == [100, 100]
        assert data["scale"] == {"x": 1.0, "y": 1.0}
        assert data["frame_size"] == {"width": 200, "height": 200}

    def test_layout_without_sizes_uses_sentinel(self):
        resp = client.post("/layout", json={"text": "ab", "radius": 50})
        assert resp.status_code == 200
        widths = [p["width"] for p in resp.json()["placements"]]
        assert widths == [SENTINEL_SIZE.width, SENTINEL_SIZE.width]

    def test_layout_sizes_as_object(self):
        resp = client.post(
            "/layout",
            json={
                "text": "abc",
                "radius": 50,
                "alignment": "outside",
                "sizes": {"1": {"width": 8, "height": 10}},
            },
        )
        assert resp.status_code == 200
        placements = resp.json()["placements"]
        assert placements[1]["width"] == 8
        assert placements[1]["radial_offset"] == 55
        assert placements[0]["radial_offset"] == 50

    def test_layout_counterclockwise(self):
        resp = client.post(
            "/layout",
            json={"text": "AB", "radius": 100, "direction": "counterclockwise"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["scale"] == {"x": -1.0, "y": -1.0}
        assert [p["glyph"]["char"] for p in data["placements"]] == ["B", "A"]
        assert [p["glyph"]["index"] for p in data["placements"]] == [1, 0]

    def test_layout_empty_text(self):
        resp = client.post("/layout", json={"text": "", "radius": 10})
        assert resp.status_code == 200
        assert resp.json()["placements"] == []

    def test_layout_includes_position(self):
        resp = client.post(
            "/layout",
            json={"text": "a", "radius": 10, "sizes": [{"width": 2, "height": 2}]},
        )
        placement = resp.json()["placements"][0]
        assert placement["x"] == pytest.approx(0.0)
        assert placement["y"] == pytest.approx(-10.0)

    def test_layout_zero_radius_returns_422(self):
        resp = client.post("/layout", json={"text": "ab", "radius": 0})
        assert resp.status_code == 422

    def test_layout_negative_spacing_returns_422(self):
        resp = client.post("/layout", json={"text": "ab", "radius": 10, "spacing": -1})
        assert resp.status_code == 422

    def test_layout_unknown_alignment_returns_422(self):
        resp = client.post(
            "/layout",
            json={"text": "ab", "radius": 10, "alignment": "middle"},
        )
        assert resp.status_code == 422
        assert "Unknown alignment" in resp.json()["detail"]

    def test_layout_unknown_direction_returns_422(self):
        resp = client.post(
            "/layout",
            json={"text": "ab", "radius": 10, "direction": "sideways"},
        )
        assert resp.status_code == 422

    def test_layout_non_integer_size_key_returns_422(self):
        resp = client.post(
            "/layout",
            json={"text": "ab", "radius": 10, "sizes": {"first": {"width": 1, "height": 1}}},
        )
        assert resp.status_code == 422

    def test_layout_missing_text_returns_422(self):
        resp = client.post("/layout", json={"radius": 10})
        assert resp.status_code == 422


class TestSequenceEndpoint:
    def test_sequence_clockwise(self):
        resp = client.post("/sequence", json={"text": "abc"})
        assert resp.status_code == 200
        assert [g["char"] for g in resp.json()["glyphs"]] == ["a", "b", "c"]

    def test_sequence_counterclockwise(self):
        resp = client.post("/sequence", json={"text": "abc", "direction": "counterclockwise"})
        assert resp.status_code == 200
        glyphs = resp.json()["glyphs"]
        assert [g["index"] for g in glyphs] == [2, 1, 0]

    def test_sequence_unknown_direction_returns_422(self):
        resp = client.post("/sequence", json={"text": "abc", "direction": "up"})
        assert resp.status_code == 422
