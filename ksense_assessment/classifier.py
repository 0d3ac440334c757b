from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ksense_assessment.logger import Log
from ksense_assessment.models import ClassificationAccumulator, PatientRecord, ScoreResult
from ksense_assessment.scoring import (
    parse_number,
    score_age,
    score_blood_pressure,
    score_temperature,
)

HIGH_RISK_THRESHOLD = 4
FEVER_THRESHOLD = 99.6


@dataclass(frozen=True)
class RecordAssessment:
    """Sub-scores and derived flags for a single patient."""

    patient_id: Any
    blood_pressure: ScoreResult
    temperature: ScoreResult
    age: ScoreResult
    has_fever: bool

    @property
    def total_risk(self) -> int:
        return self.blood_pressure.score + self.temperature.score + self.age.score

    @property
    def is_high_risk(self) -> bool:
        return self.total_risk >= HIGH_RISK_THRESHOLD

    @property
    def has_issue(self) -> bool:
        return self.blood_pressure.issue or self.temperature.issue or self.age.issue


def assess_patient(record: PatientRecord) -> RecordAssessment:
    temperature = score_temperature(record.temperature)
    has_fever = False
    if not temperature.issue:
        value = parse_number(record.temperature)
        has_fever = value is not None and value >= FEVER_THRESHOLD

    return RecordAssessment(
        patient_id=record.id,
        blood_pressure=score_blood_pressure(record.systolic, record.diastolic),
        temperature=temperature,
        age=score_age(record.age),
        has_fever=has_fever,
    )


def classify_patient(
    record: PatientRecord, accumulator: ClassificationAccumulator
) -> RecordAssessment:
    """Score one record and append its id to every list it qualifies for."""
    assessment = assess_patient(record)
    Log.debug(
        f"Patient {assessment.patient_id}: bp={assessment.blood_pressure.score} "
        f"temp={assessment.temperature.score} age={assessment.age.score} "
        f"total={assessment.total_risk} issue={assessment.has_issue}"
    )

    if assessment.is_high_risk:
        accumulator.high_risk_patients.append(assessment.patient_id)
    if assessment.has_fever:
        accumulator.fever_patients.append(assessment.patient_id)
    if assessment.has_issue:
        accumulator.data_quality_issues.append(assessment.patient_id)
    return assessment


def classify_patients(
    records: Iterable[PatientRecord],
    accumulator: ClassificationAccumulator | None = None,
) -> ClassificationAccumulator:
    """Fold `records` into `accumulator` (a new one if omitted) and return it."""
    if accumulator is None:
        accumulator = ClassificationAccumulator()
    for record in records:
        classify_patient(record, accumulator)
    return accumulator
