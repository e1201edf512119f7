import pytest

from padelstats.errors import EmptyPayloadWarning, MalformedMetricError
from padelstats.ingest import RawAnalysisPayload, looks_like_raw_payload, transform_analysis_results


def test_two_player_payload(two_player_payload):
    envelope = transform_analysis_results(two_player_payload)

    players = envelope.player_analytics.players
    assert [player.player_id for player in players] == ["a", "b"]
    assert players[0].calories_burned == pytest.approx(24.05, abs=0.01)
    assert players[1].total_distance_km == pytest.approx(1.2)
    assert players[1].calories_burned == pytest.approx(144.6)
    assert envelope.job_id == "job-123"
    assert envelope.analysis_status == "completed"
    assert envelope.status == "completed"


def test_clips_become_highlights(two_player_payload):
    envelope = transform_analysis_results(two_player_payload)

    assert envelope.highlights == {
        "all": [
            "https://cdn.example.com/clips/1.mp4",
            "https://cdn.example.com/clips/2.mp4",
            "https://cdn.example.com/clips/3.mp4",
        ]
    }
    assert len(envelope.player_analytics.players) == 2
    assert all(player.player_id != "all_clips" for player in envelope.player_analytics.players)


def test_player_key_order_is_preserved():
    metrics = {"Distance Covered": "10 Meters", "Average Speed": "2 Kilometers per Hour"}
    payload = {"job_id": "j", "results": {"d": metrics, "all_clips": ["u"], "b": metrics, "c": metrics, "a": metrics}}

    envelope = transform_analysis_results(payload)
    assert [player.player_id for player in envelope.player_analytics.players] == ["d", "b", "c", "a"]


def test_empty_results_are_valid():
    with pytest.warns(EmptyPayloadWarning):
        envelope = transform_analysis_results({"job_id": "j", "analysis_status": "completed", "results": {}})

    assert envelope.player_analytics.players == []
    assert envelope.highlights == {}


def test_clips_without_players():
    with pytest.warns(EmptyPayloadWarning, match="no players"):
        envelope = transform_analysis_results({"job_id": "j", "results": {"all_clips": ["u1", "u2"]}})

    assert envelope.player_analytics.players == []
    assert envelope.highlights == {"all": ["u1", "u2"]}


def test_duplicate_clips_are_kept_verbatim():
    with pytest.warns(EmptyPayloadWarning):
        envelope = transform_analysis_results({"job_id": "j", "results": {"all_clips": ["u1", "u1", "not a url"]}})
    assert envelope.highlights == {"all": ["u1", "u1", "not a url"]}


@pytest.mark.parametrize("clips", [[], "https://cdn.example.com/clip.mp4", [1, 2]])
def test_empty_or_malformed_clips_leave_highlights_empty(clips):
    with pytest.warns(EmptyPayloadWarning, match="no clips"):
        envelope = transform_analysis_results({"job_id": "j", "results": {"all_clips": clips}})
    assert envelope.highlights == {}


def test_malformed_required_metric_fails_job(two_player_payload):
    two_player_payload["results"]["b"]["Distance Covered"] = "lots"

    with pytest.raises(MalformedMetricError) as excinfo:
        transform_analysis_results(two_player_payload)
    assert excinfo.value.field == "Distance Covered"
    assert excinfo.value.value == "lots"


def test_non_mapping_player_entry_raises():
    with pytest.raises(MalformedMetricError) as excinfo:
        transform_analysis_results({"job_id": "j", "results": {"a": "25 Meters"}})
    assert excinfo.value.field == "a"


def test_accepts_payload_model(two_player_payload):
    payload = RawAnalysisPayload.model_validate(two_player_payload)

    assert [key for key, _ in payload.player_entries()] == ["a", "b"]
    assert len(payload.clip_urls()) == 3
    assert transform_analysis_results(payload) == transform_analysis_results(two_player_payload)


def test_status_falls_back_to_raw_status():
    with pytest.warns(EmptyPayloadWarning):
        envelope = transform_analysis_results({"job_id": "j", "status": "success", "results": {}})
    assert envelope.status == "success"
    assert envelope.analysis_status is None


def test_looks_like_raw_payload(two_player_payload):
    assert looks_like_raw_payload(two_player_payload)
    assert not looks_like_raw_payload({"player_analytics": {"players": []}, "highlights": {}})
    assert not looks_like_raw_payload(["results"])


def test_body_mass_default_read_from_environment(two_player_payload, monkeypatch):
    monkeypatch.setenv("PADELSTATS_BODY_MASS_KG", "60")

    envelope = transform_analysis_results(two_player_payload)
    assert envelope.player_analytics.players[1].calories_burned == pytest.approx(1.2 * 60 * 0.9 * 1.5 + 15)
