import pytest
from fastapi.testclient import TestClient

@pytest.mark.smoke
def test_health_and_seeded_app(scheduler):
    from vend_backend.app.main import create_app
    from vend_backend.app.services.data_stores import FleetStore

    app = create_app(FleetStore(scheduler), seed=True)
    with TestClient(app) as client:
        assert client.get("/health").json() == {"ok": True}
        assert client.get("/api/health").json() == {"ok": True}

        paths = client.get("/openapi.json").json()["paths"]
        for p in ("/api/machines", "/api/brews", "/api/analytics", "/api/dashboard/stats"):
            assert p in paths

        machines = client.get("/api/machines").json()
        assert len(machines) == 4

        stats = client.get("/api/dashboard/stats").json()
        assert stats["totalMachines"] == 4 and stats["totalRevenue"] == "381.00"

        # sample analytics cover 30 days x 4 machines x 4 coffee types
        assert len(client.get("/api/analytics").json()) == 480

        brew = client.post("/api/brews", json={"machineId": machines[0]["id"], "coffeeType": "latte"}).json()
        assert brew["status"] == "pending"

    # leaving the client runs shutdown, which drops the pending brew timer
    assert scheduler.pending() == 0
