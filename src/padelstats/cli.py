"""Command-line interface for normalizing analysis payloads."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from padelstats.config import UNIT_DISTANCE, UNIT_SPEED
from padelstats.energy import intensity_level
from padelstats.errors import MalformedMetricError, MissingRequiredContextError
from padelstats.formatting import format_response
from padelstats.ingest import format_quantity
from padelstats.models import FormattedResponse


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Normalize a match-analysis payload")
    parser.add_argument("payload", type=Path, help="Path to a raw payload or envelope JSON file")
    parser.add_argument("--match-id", default=None, help="Match identifier to attach")
    parser.add_argument("--user-id", default=None, help="Requesting user identifier to attach")
    parser.add_argument("--output", type=Path, default=None, help="Write formatted JSON here instead of stdout")
    parser.add_argument(
        "--body-mass",
        type=float,
        default=None,
        help="Body mass in kg for calorie estimates (defaults to PADELSTATS_BODY_MASS_KG or 80)",
    )
    parser.add_argument("--summary", action="store_true", help="Print a per-player summary")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g. INFO, DEBUG)")
    return parser.parse_args(argv)


def _print_summary(response: FormattedResponse) -> None:
    players = response.player_analytics.players
    print(f"Job {response.job_id or '-'} ({response.analysis_status or 'unknown'}): {len(players)} players")
    for player in players:
        print(
            "  {id}: {distance}, avg {speed} ({tier}), {sprints} sprints, {kcal:.2f} kcal".format(
                id=player.player_id,
                distance=format_quantity(player.total_distance_km, UNIT_DISTANCE),
                speed=format_quantity(player.average_speed_kmh, UNIT_SPEED),
                tier=intensity_level(player.average_speed_kmh),
                sprints=player.total_sprint_bursts,
                kcal=player.calories_burned,
            )
        )
    for group, urls in response.highlights.items():
        print(f"  highlights[{group}]: {len(urls)} clips")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    logging.captureWarnings(True)

    try:
        data = json.loads(args.payload.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Unable to read {args.payload}: {exc}", file=sys.stderr)
        return 2

    try:
        response = format_response(
            data,
            match_id=args.match_id,
            user_id=args.user_id,
            body_mass_kg=args.body_mass,
        )
    except MalformedMetricError as exc:
        print(f"Analysis rejected, metric {exc.field!r} is malformed: {exc.value!r}", file=sys.stderr)
        return 2
    except MissingRequiredContextError as exc:
        print(f"Missing {exc.identifier}; pass --{exc.identifier.replace('_', '-')}", file=sys.stderr)
        return 2
    except ValidationError as exc:
        print(f"Analysis rejected: {exc}", file=sys.stderr)
        return 2

    payload = json.dumps(response.model_dump(), indent=2)
    if args.output:
        args.output.write_text(payload, encoding="utf-8")
        print(f"Wrote formatted analysis to {args.output}")
    else:
        print(payload)

    if args.summary:
        _print_summary(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
