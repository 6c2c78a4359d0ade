"""
Integration Tests for the REST and WebSocket API
"""

import json

import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app

from conftest import ideal_points, landmarks_to_json, make_landmarks, points_with_draw_length


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def frame_json(points, count=33):
    return landmarks_to_json(make_landmarks(points, count=count))


class TestRestApi:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["websocket"] == "/ws/form"

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_analyze_frame(self, client):
        response = client.post("/api/analysis/frame", json={"landmarks": frame_json(ideal_points())})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        analysis = body["analysis"]
        assert analysis["dominant_hand"] == "right"
        assert analysis["bow_arm"] == "left"
        assert analysis["feedback"] == []
        assert analysis["overall_score"] == pytest.approx(100.0, abs=1e-6)
        assert set(analysis["scores"]) == {
            "bow_arm_straightness",
            "draw_arm_angle",
            "shoulder_alignment",
            "stance",
            "head_position",
        }
        assert analysis["measurements"]["hip_width"] == pytest.approx(60.0)

    def test_analyze_indeterminate_frame(self, client):
        response = client.post("/api/analysis/frame", json={"landmarks": frame_json(ideal_points())[:20]})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is False
        assert body["analysis"] is None
        assert body["error"]

    def test_analyze_frame_rejects_malformed_landmark(self, client):
        response = client.post("/api/analysis/frame", json={"landmarks": [{"x": "left"}]})
        assert response.status_code == 422

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
    def test_analyze_frame_rejects_non_finite_coordinates(self, client, value):
        landmarks = frame_json(ideal_points())
        landmarks[0]["x"] = "__placeholder__"
        body = json.dumps({"landmarks": landmarks}).replace("\"__placeholder__\"", value)

        response = client.post(
            "/api/analysis/frame",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    @pytest.mark.parametrize("payload, expected", [
        ({"current": {"draw_length": 60}, "previous": {"draw_length": 50}}, "drawing"),
        ({"current": {"draw_length": 101}, "previous": {"draw_length": 100}}, "anchor"),
        ({"current": {"draw_length": 85}, "previous": {"draw_length": 100}}, "release"),
        ({"current": {"draw_length": 70}, "previous": {"draw_length": 75}}, "follow_through"),
        ({"current": {"draw_length": 70}, "previous": {"draw_length": 90}}, "release"),
        ({"current": {"draw_length": 88}, "previous": {"draw_length": 90}}, "idle"),
        ({"current": {"draw_length": 60}, "previous": None}, "idle"),
        ({}, "idle"),
    ])
    def test_classify_phase(self, client, payload, expected):
        response = client.post("/api/analysis/phase", json=payload)
        assert response.status_code == 200
        assert response.json()["phase"] == expected

    def test_analyze_sequence(self, client):
        frames = [
            frame_json(points_with_draw_length(60)),
            frame_json(points_with_draw_length(80)),
            [None] * 5,
            frame_json(points_with_draw_length(90)),
        ]
        response = client.post("/api/analysis/sequence", json={"frames": frames})
        assert response.status_code == 200

        body = response.json()
        assert body["analyzed_frames"] == 3
        assert [r["phase"] for r in body["results"]] == ["idle", "drawing", "idle", "idle"]
        assert [r["frame_number"] for r in body["results"]] == [0, 1, 2, 3]
        assert body["results"][2]["analysis"] is None

    def test_sequence_limit(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(MAX_BATCH_FRAMES=2)
        frames = [frame_json(points_with_draw_length(60))] * 3

        response = client.post("/api/analysis/sequence", json={"frames": frames})
        assert response.status_code == 413


class TestWebSocket:

    def test_session_flow(self, client):
        with client.websocket_connect("/ws/form") as ws:
            assert ws.receive_json()["type"] == "session_started"

            ws.send_json({
                "type": "frame",
                "data": {"landmarks": frame_json(points_with_draw_length(60)), "frame_number": 7},
                "timestamp": 0,
            })
            first = ws.receive_json()
            assert first["type"] == "form_result"
            assert first["data"]["frame_number"] == 7
            assert first["data"]["phase"] == "idle"
            assert first["data"]["analysis"]["draw_length"] == pytest.approx(60.0)

            ws.send_json({
                "type": "frame",
                "data": {"landmarks": frame_json(points_with_draw_length(80)), "frame_number": 8},
                "timestamp": 33,
            })
            assert ws.receive_json()["data"]["phase"] == "drawing"

            ws.send_json({"type": "end_session", "data": {}, "timestamp": 66})
            assert ws.receive_json()["type"] == "session_ended"

    def test_indeterminate_frame(self, client):
        with client.websocket_connect("/ws/form") as ws:
            ws.receive_json()
            ws.send_json({"type": "frame", "data": {"landmarks": [None] * 3}, "timestamp": 0})

            message = ws.receive_json()
            assert message["type"] == "form_result"
            assert message["data"]["analysis"] is None
            assert message["data"]["phase"] == "idle"

    def test_start_session_resets_tracking(self, client):
        with client.websocket_connect("/ws/form") as ws:
            ws.receive_json()
            ws.send_json({"type": "frame", "data": {"landmarks": frame_json(points_with_draw_length(60))}, "timestamp": 0})
            ws.receive_json()

            ws.send_json({"type": "start_session", "data": {}, "timestamp": 1})
            assert ws.receive_json()["type"] == "session_started"

            ws.send_json({"type": "frame", "data": {"landmarks": frame_json(points_with_draw_length(80))}, "timestamp": 2})
            message = ws.receive_json()
            assert message["data"]["phase"] == "idle"
            assert message["data"]["frame_number"] == 0

    def test_errors(self, client):
        with client.websocket_connect("/ws/form") as ws:
            ws.receive_json()

            ws.send_json({"type": "bogus", "data": {}, "timestamp": 0})
            message = ws.receive_json()
            assert message["type"] == "error"
            assert "bogus" in message["data"]["error"]

            ws.send_json({"type": "frame", "data": {}, "timestamp": 0})
            assert ws.receive_json()["type"] == "error"

            ws.send_text("not json")
            message = ws.receive_json()
            assert message["type"] == "error"
            assert message["data"]["error"] == "Invalid JSON"

    def test_non_object_message(self, client):
        with client.websocket_connect("/ws/form") as ws:
            ws.receive_json()

            for message in ([1, 2], "frame", 42, None):
                ws.send_json(message)
                reply = ws.receive_json()
                assert reply["type"] == "error"
                assert reply["data"]["error"] == "Message must be a JSON object"

            ws.send_json({"type": "end_session", "data": {}, "timestamp": 0})
            assert ws.receive_json()["type"] == "session_ended"
