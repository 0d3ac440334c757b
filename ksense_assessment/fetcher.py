from collections.abc import Iterator, Mapping
from typing import Any

from ksense_assessment.client import AssessmentClient
from ksense_assessment.exceptions import MalformedResponseError
from ksense_assessment.logger import Log
from ksense_assessment.models import PatientRecord

PATIENTS_PATH = "/patients"


def iter_patient_pages(
    client: AssessmentClient, page_size: int | None = None
) -> Iterator[list[PatientRecord]]:
    """Yield one list of records per page, starting at page 1.

    Stops at the first page with no patients. The next page is only requested
    once the caller has consumed the current one.
    """
    page = 1
    while True:
        params: dict[str, Any] = {"page": page}
        if page_size is not None:
            params["limit"] = page_size

        data = client.get_json(PATIENTS_PATH, params=params)
        records = _parse_page(data, page)
        if not records:
            Log.info(f"Page {page} is empty, pagination complete")
            return

        Log.info(f"Fetched page {page} with {len(records)} patients")
        yield records
        page += 1


def fetch_all_patients(
    client: AssessmentClient, page_size: int | None = None
) -> list[PatientRecord]:
    patients: list[PatientRecord] = []
    for records in iter_patient_pages(client, page_size):
        patients.extend(records)
    return patients


def _parse_page(data: Any, page: int) -> list[PatientRecord]:
    if not isinstance(data, Mapping):
        raise MalformedResponseError(f"Page {page} body is not a JSON object")

    raw_patients = data.get("patients") or []
    if not isinstance(raw_patients, list):
        raise MalformedResponseError(f"Page {page} 'patients' is not a list")

    records = []
    for raw in raw_patients:
        if not isinstance(raw, Mapping):
            raise MalformedResponseError(f"Page {page} contains a non-object patient entry")
        records.append(PatientRecord.from_dict(raw))
    return records
