import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _default_body_mass(monkeypatch):
    monkeypatch.delenv("PADELSTATS_BODY_MASS_KG", raising=False)


@pytest.fixture
def two_player_payload():
    return {
        "status": "success",
        "job_id": "job-123",
        "analysis_status": "completed",
        "results": {
            "a": {
                "Distance Covered": "25.586 Meters",
                "Average Speed": "14.47575 Kilometers per Hour",
                "Peak Speed": "21.3 Kilometers per Hour",
                "Net Dominance": "12.5%",
                "Dead Zone Presence": "30.1 %",
                "Baseline Play": "57.4%",
                "Total Sprint Bursts": "4",
                "Player Heatmap": "https://cdn.example.com/heatmaps/a.png",
            },
            "b": {
                "Distance Covered": "1200 Meters",
                "Average Speed": "4.0 Kilometers per Hour",
                "Peak Speed": "9.8 Kilometers per Hour",
                "Net Dominance": "40%",
                "Dead Zone Presence": "10%",
                "Baseline Play": "50%",
                "Total Sprint Bursts": "3",
            },
            "all_clips": [
                "https://cdn.example.com/clips/1.mp4",
                "https://cdn.example.com/clips/2.mp4",
                "https://cdn.example.com/clips/3.mp4",
            ],
        },
    }
