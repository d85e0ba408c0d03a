"""Tests for the REST and WebSocket surface."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from conftest import build_frame, frame_to_json
from api.schemas import LandmarkSchema
from core.settings import Settings
from main import app, create_app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


# =====================================================================
# REST
# =====================================================================

class TestRestApi:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Club Tracer API"
        assert response.json()["websocket"] == "/ws/trajectory"

    def test_app_factory_uses_given_settings(self):
        custom = Settings(environment="staging", cors_origins=["http://example.test"])
        with TestClient(create_app(custom)) as custom_client:
            assert custom_client.get("/").json()["environment"] == "staging"
            response = custom_client.get("/api/health", headers={"Origin": "http://example.test"})
            assert response.headers["access-control-allow-origin"] == "http://example.test"

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"

    def test_default_config(self, client):
        response = client.get("/api/trajectory/config")
        assert response.status_code == 200
        assert response.json() == {
            "min_confidence": 0.3,
            "smoothing_factor": 0.2,
            "interpolation_frames": 3,
            "max_gap_frames": 5,
            "club_length_multiplier": 2.5,
        }

    def test_build_trajectory(self, client, swing_frames):
        payload = {"frames": [frame_to_json(f) for f in swing_frames]}
        response = client.post("/api/trajectory", json=payload)
        assert response.status_code == 200

        body = response.json()
        assert body["total_frames"] == len(body["positions"]) > 0
        assert body["handedness"] in ("left", "right")
        assert 0.0 <= body["smoothness"] <= 1.0
        frames = [p["frame"] for p in body["positions"]]
        assert frames == sorted(set(frames))

    def test_build_trajectory_empty(self, client):
        response = client.post("/api/trajectory", json={"frames": []})
        assert response.status_code == 200
        body = response.json()
        assert body["positions"] == []
        assert body["total_frames"] == 0
        assert body["handedness"] == "right"

    def test_config_override(self, client):
        frames = [build_frame(frame_number=0), build_frame(frame_number=3)]
        payload = {
            "frames": [frame_to_json(f) for f in frames],
            "config": {"max_gap_frames": 2},
        }
        body = client.post("/api/trajectory", json=payload).json()
        assert [p["frame"] for p in body["positions"]] == [0, 3]

    def test_invalid_config_rejected(self, client):
        payload = {"frames": [], "config": {"min_confidence": 3.0}}
        response = client.post("/api/trajectory", json=payload)
        assert response.status_code == 422

    def test_short_frames_do_not_fail(self, client):
        payload = {"frames": [frame_to_json(build_frame(count=10))]}
        response = client.post("/api/trajectory", json=payload)
        assert response.status_code == 200
        assert response.json()["total_frames"] == 0


# =====================================================================
# WebSocket
# =====================================================================

class TestWebSocket:
    def test_session_flow(self, client):
        with client.websocket_connect("/ws/trajectory") as ws:
            assert ws.receive_json()["type"] == "session_started"

            ws.send_json({"type": "start_session", "data": {"max_gap_frames": 4}})
            started = ws.receive_json()
            assert started["type"] == "session_started"
            assert started["data"]["config"]["max_gap_frames"] == 4

            for frame_number in (0, 1):
                ws.send_json({
                    "type": "frame",
                    "data": frame_to_json(build_frame(frame_number=frame_number)),
                })
                reply = ws.receive_json()
                assert reply["type"] == "club_head"
                assert reply["data"]["frame_number"] == frame_number
                assert reply["data"]["position"]["frame"] == frame_number

            ws.send_json({"type": "end_session"})
            summary = ws.receive_json()
            assert summary["type"] == "trajectory_summary"
            assert summary["data"]["total_frames"] == 2
            assert ws.receive_json()["type"] == "session_ended"

    def test_skipped_frame_returns_null(self, client):
        with client.websocket_connect("/ws/trajectory") as ws:
            ws.receive_json()
            ws.send_json({
                "type": "frame",
                "data": frame_to_json(build_frame(visibility=0.1)),
            })
            reply = ws.receive_json()
            assert reply["type"] == "club_head"
            assert reply["data"]["position"] is None
            ws.send_json({"type": "end_session"})

    def test_bad_messages_keep_connection_open(self, client):
        with client.websocket_connect("/ws/trajectory") as ws:
            ws.receive_json()

            ws.send_text("not json")
            assert ws.receive_json()["type"] == "error"

            ws.send_json({"type": "bogus"})
            assert ws.receive_json()["type"] == "error"

            ws.send_json({"type": "frame", "data": {"landmarks": "nope"}})
            assert ws.receive_json()["type"] == "error"

            ws.send_json({"type": "start_session", "data": {"min_confidence": 5}})
            assert ws.receive_json()["type"] == "error"

            ws.send_json({"type": "end_session"})
            assert ws.receive_json()["type"] == "trajectory_summary"
            assert ws.receive_json()["type"] == "session_ended"


# =====================================================================
# Schemas
# =====================================================================

class TestLandmarkSchema:
    @pytest.mark.parametrize("field", ["x", "y", "z"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_coordinates_rejected(self, field, value):
        fields = {"x": 0.5, "y": 0.5, "z": 0.0, field: value}
        with pytest.raises(ValidationError):
            LandmarkSchema(**fields)

    def test_optional_fields(self):
        landmark = LandmarkSchema(x=1.2, y=-0.1).to_domain()
        assert landmark.z is None
        assert landmark.visibility is None
        assert landmark.body_part is None
