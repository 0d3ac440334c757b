from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class _Missing:
    """Marker for a field the API did not send at all."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class PatientRecord:
    """One patient as returned by the API, with raw (unparsed) vital signs."""

    id: Any
    systolic: Any = MISSING
    diastolic: Any = MISSING
    temperature: Any = MISSING
    age: Any = MISSING

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PatientRecord":
        blood_pressure = data.get("blood_pressure")
        if not isinstance(blood_pressure, Mapping):
            blood_pressure = {}
        return cls(
            id=data.get("id"),
            systolic=blood_pressure.get("systolic", MISSING),
            diastolic=blood_pressure.get("diastolic", MISSING),
            temperature=data.get("temperature", MISSING),
            age=data.get("age", MISSING),
        )


@dataclass(frozen=True)
class ScoreResult:
    score: int
    issue: bool


@dataclass
class ClassificationAccumulator:
    """The three id lists built up while paging through patients.

    Lists are append-only and keep duplicates.
    """

    high_risk_patients: list[Any] = field(default_factory=list)
    fever_patients: list[Any] = field(default_factory=list)
    data_quality_issues: list[Any] = field(default_factory=list)

    def to_payload(self) -> dict[str, list[Any]]:
        return {
            "high_risk_patients": list(self.high_risk_patients),
            "fever_patients": list(self.fever_patients),
            "data_quality_issues": list(self.data_quality_issues),
        }

    def counts(self) -> dict[str, int]:
        return {key: len(ids) for key, ids in self.to_payload().items()}


@dataclass(frozen=True)
class SubmissionOutcome:
    ok: bool
    status_code: int | None
    body: Any
