import argparse
import json
import sys

from pydantic import ValidationError

from ksense_assessment.classifier import classify_patients
from ksense_assessment.client import AssessmentClient
from ksense_assessment.config import Settings
from ksense_assessment.exceptions import AssessmentError
from ksense_assessment.fetcher import iter_patient_pages
from ksense_assessment.logger import LOG_LEVELS, Log
from ksense_assessment.models import ClassificationAccumulator
from ksense_assessment.submitter import submit_assessment


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ksense-assessment",
        description="Score every patient from the assessment API and submit the result",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Fetch and classify patients but do not submit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL",
    )
    return parser.parse_args(argv)


def run(
    client: AssessmentClient,
    *,
    page_size: int | None = None,
    dry_run: bool = False,
) -> int:
    """Fetch -> classify -> submit. Returns the process exit code."""
    Log.info("Fetching patients")
    accumulator = ClassificationAccumulator()
    try:
        for records in iter_patient_pages(client, page_size):
            classify_patients(records, accumulator)
    except AssessmentError as exc:
        Log.error(f"Fetching patients failed, nothing submitted: {exc}")
        return 1

    Log.info(f"Counts: {accumulator.counts()}")
    print("Submission Data:", json.dumps(accumulator.to_payload(), indent=2))

    if dry_run:
        Log.info("Dry run, skipping submission")
        return 0

    outcome = submit_assessment(client, accumulator)
    if outcome.ok:
        print(outcome.status_code, outcome.body)
    else:
        print(outcome.status_code, outcome.body, file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    Log.configure(args.log_level or settings.log_level)

    if not settings.api_key:
        Log.error("API_KEY is not set; add it to the environment or .env")
        return 1

    with AssessmentClient.from_settings(settings) as client:
        return run(client, page_size=settings.page_size, dry_run=args.dry_run)


if __name__ == "__main__":
    raise SystemExit(main())
