import json
import argparse
import sys

from backend.core.catalog import get_catalog
from backend.core.exercise_matcher import ExerciseNameMatcher
from backend.core.plan_enricher import PlanEnricher, matching_stats
from domain.converters import normalize_plan
from domain.models import Language


def enrich_command(args) -> None:
    # Load input JSON
    with open(args.input, "r", encoding="utf-8") as f:
        document = json.load(f)

    enricher = PlanEnricher(ExerciseNameMatcher(get_catalog()))
    plan = enricher.enrich_plan(normalize_plan(document), Language(args.language))
    stats = matching_stats(plan)

    output = json.dumps(plan.to_document(), ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
    else:
        print(output)

    print(
        f"Matched {stats.matched}/{stats.total} exercises ({stats.match_rate:.0%})",
        file=sys.stderr,
    )


def match_command(args) -> int:
    matcher = ExerciseNameMatcher(get_catalog())
    result = matcher.match_detailed(args.name, Language(args.language))
    if not result.matched:
        print(f"No catalog match for: {args.name}", file=sys.stderr)
        return 1

    print(json.dumps({
        "id": result.entry.id,
        "name": result.entry.display_name(Language(args.language)),
        "externalMediaId": result.entry.external_media_id,
        "method": result.method.value,
    }, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Match exercise names and enrich training plans")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enrich = subparsers.add_parser("enrich", help="Attach catalog media ids to a plan JSON file")
    enrich.add_argument("input", help="Input plan JSON file path")
    enrich.add_argument("-l", "--language", choices=["es", "en"], default="es")
    enrich.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")

    match = subparsers.add_parser("match", help="Resolve one exercise name against the catalog")
    match.add_argument("name", help="Exercise name")
    match.add_argument("-l", "--language", choices=["es", "en"], default="es")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.command == "enrich":
            enrich_command(args)
            return 0
        return match_command(args)

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
