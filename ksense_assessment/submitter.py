from ksense_assessment.client import AssessmentClient
from ksense_assessment.exceptions import ApiResponseError, AssessmentApiError
from ksense_assessment.logger import Log
from ksense_assessment.models import ClassificationAccumulator, SubmissionOutcome

SUBMIT_PATH = "/submit-assessment"


def submit_assessment(
    client: AssessmentClient, accumulator: ClassificationAccumulator
) -> SubmissionOutcome:
    """Send the classification once. Failures are logged and returned, never raised."""
    try:
        status_code, body = client.post_json(SUBMIT_PATH, accumulator.to_payload())
    except ApiResponseError as exc:
        Log.error(f"Submission rejected with HTTP {exc.status_code}: {exc.body}")
        return SubmissionOutcome(ok=False, status_code=exc.status_code, body=exc.body)
    except AssessmentApiError as exc:
        Log.error(f"Submission failed: {exc}")
        return SubmissionOutcome(ok=False, status_code=None, body=str(exc))

    Log.info(f"Submission accepted with HTTP {status_code}")
    return SubmissionOutcome(ok=True, status_code=status_code, body=body)
