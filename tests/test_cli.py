import json
from pathlib import Path

import pytest

from padelstats.cli import main


def test_cli_writes_formatted_output(tmp_path: Path, two_player_payload, capsys):
    payload_path = tmp_path / "payload.json"
    payload_path.write_text(json.dumps(two_player_payload))
    output_path = tmp_path / "formatted.json"

    exit_code = main([str(payload_path), "--match-id", "m1", "--user-id", "u1", "--output", str(output_path), "--summary"])
    assert exit_code == 0

    written = json.loads(output_path.read_text())
    assert written["match_id"] == "m1"
    assert [player["player_id"] for player in written["player_analytics"]["players"]] == ["a", "b"]

    out = capsys.readouterr().out
    assert "a: 25.586 Meters" in out
    assert "(high)" in out
    assert "highlights[all]: 3 clips" in out


def test_cli_reports_malformed_metric(tmp_path: Path, two_player_payload, capsys):
    two_player_payload["results"]["b"]["Distance Covered"] = "far"
    payload_path = tmp_path / "payload.json"
    payload_path.write_text(json.dumps(two_player_payload))

    assert main([str(payload_path), "--match-id", "m1", "--user-id", "u1"]) == 2
    assert "Distance Covered" in capsys.readouterr().err


def test_cli_requires_match_id(tmp_path: Path, two_player_payload, capsys):
    payload_path = tmp_path / "payload.json"
    payload_path.write_text(json.dumps(two_player_payload))

    assert main([str(payload_path), "--user-id", "u1"]) == 2
    assert "--match-id" in capsys.readouterr().err


@pytest.mark.parametrize("contents", ["{not json", None])
def test_cli_unreadable_payload(tmp_path: Path, contents, capsys):
    payload_path = tmp_path / "payload.json"
    if contents is not None:
        payload_path.write_text(contents)

    assert main([str(payload_path), "--match-id", "m1", "--user-id", "u1"]) == 2
    assert "Unable to read" in capsys.readouterr().err


def test_cli_reports_invalid_record(tmp_path: Path, two_player_payload, capsys):
    two_player_payload["results"][""] = two_player_payload["results"].pop("b")
    payload_path = tmp_path / "payload.json"
    payload_path.write_text(json.dumps(two_player_payload))

    assert main([str(payload_path), "--match-id", "m1", "--user-id", "u1"]) == 2
    assert "Analysis rejected" in capsys.readouterr().err
