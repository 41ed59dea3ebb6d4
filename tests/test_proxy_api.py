from __future__ import annotations


def test_bookings_proxy_returns_upstream_json(client):
    response = client.get("/api/bookings")
    assert response.status_code == 200
    assert response.json() == {"items": [{"id": 1, "status": "Booked"}]}


def test_bookings_proxy_error_body(failing_proxy_client):
    response = failing_proxy_client.get("/api/bookings")
    assert response.status_code == 500
    assert response.json() == {"error": "Lodgify API Error: 401 - Unauthorized"}


def test_insights_proxy_forwards_body(client):
    body = {
        "contents": [{"parts": [{"text": "How many bookings?"}]}],
        "systemInstruction": {"parts": [{"text": "Be concise."}]},
    }
    response = client.post("/api/generate-insights", json=body)
    assert response.status_code == 200
    assert response.json()["candidates"][0]["content"]["parts"][0]["text"] == "Revenue is up."


def test_insights_proxy_error_body(failing_proxy_client):
    response = failing_proxy_client.post("/api/generate-insights", json={"contents": []})
    assert response.status_code == 500
    assert response.json() == {"error": "API key not valid."}


def test_insights_proxy_rejects_get(client):
    response = client.get("/api/generate-insights")
    assert response.status_code == 405
