from unittest.mock import MagicMock, call

import pytest

from ksense_assessment.exceptions import MalformedResponseError, RetryBudgetExceededError
from ksense_assessment.fetcher import fetch_all_patients, iter_patient_pages
from ksense_assessment.models import PatientRecord


def _patient(pid: str) -> dict[str, object]:
    return {
        "id": pid,
        "blood_pressure": {"systolic": 120, "diastolic": 80},
        "temperature": 98.6,
        "age": 40,
    }


def _make_client(pages: list[object]) -> MagicMock:
    client = MagicMock()
    client.get_json.side_effect = pages
    return client


class TestPagination:
    def test_stops_at_first_empty_page(self) -> None:
        client = _make_client(
            [
                {"patients": [_patient("A"), _patient("B")]},
                {"patients": [_patient("C")]},
                {"patients": []},
            ]
        )

        patients = fetch_all_patients(client)

        assert [p.id for p in patients] == ["A", "B", "C"]
        assert client.get_json.call_args_list == [
            call("/patients", params={"page": 1}),
            call("/patients", params={"page": 2}),
            call("/patients", params={"page": 3}),
        ]

    def test_missing_patients_field_ends_pagination(self) -> None:
        client = _make_client([{"patients": [_patient("A")]}, {}])

        assert len(fetch_all_patients(client)) == 1
        assert client.get_json.call_count == 2

    def test_null_patients_field_ends_pagination(self) -> None:
        client = _make_client([{"patients": None}])

        assert fetch_all_patients(client) == []
        assert client.get_json.call_count == 1

    def test_sends_page_size(self) -> None:
        client = _make_client([{"patients": []}])

        fetch_all_patients(client, page_size=20)

        client.get_json.assert_called_once_with("/patients", params={"page": 1, "limit": 20})

    def test_pages_are_lazy(self) -> None:
        client = _make_client([{"patients": [_patient("A")]}, {"patients": []}])
        pages = iter_patient_pages(client)

        first = next(pages)

        assert first == [PatientRecord.from_dict(_patient("A"))]
        assert client.get_json.call_count == 1


class TestFetchErrors:
    def test_retry_budget_error_propagates(self) -> None:
        client = _make_client(
            [{"patients": [_patient("A")]}, RetryBudgetExceededError("/patients", 5)]
        )

        with pytest.raises(RetryBudgetExceededError):
            fetch_all_patients(client)

    def test_non_object_body(self) -> None:
        client = _make_client([["not", "an", "object"]])

        with pytest.raises(MalformedResponseError, match="not a JSON object"):
            fetch_all_patients(client)

    def test_non_list_patients(self) -> None:
        client = _make_client([{"patients": "A,B"}])

        with pytest.raises(MalformedResponseError, match="not a list"):
            fetch_all_patients(client)

    def test_non_object_patient_entry(self) -> None:
        client = _make_client([{"patients": [_patient("A"), None]}])

        with pytest.raises(MalformedResponseError, match="non-object patient"):
            fetch_all_patients(client)
