"""Rule tables for the blood pressure, temperature and age sub-scores.

Raw values arrive as numbers or free text. They are read leniently: the text
is trimmed and its longest leading numeric prefix is used, so "101.2F" reads
as 101.2 and "40.9" reads as age 40. Anything without a numeric prefix, plus
missing values and booleans, counts as unparseable and raises the issue flag.
"""

import math
import re
from typing import Any

from ksense_assessment.models import MISSING, ScoreResult

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"[+-]?\d+")

_ISSUE = ScoreResult(score=0, issue=True)


def _as_text(value: Any) -> str | None:
    if value is MISSING or value is None or isinstance(value, bool):
        return None
    return str(value).strip()


def parse_number(value: Any) -> float | None:
    """Read a float from the start of `value`; None if there is none."""
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    text = _as_text(value)
    if text is None:
        return None
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group())


def parse_integer(value: Any) -> int | float | None:
    """Read an integer from the start of `value`, truncating any fraction.

    Digit strings too long to convert come back as a signed infinity.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return None
    text = _as_text(value)
    if text is None:
        return None
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    digits = match.group()
    try:
        return int(digits)
    except ValueError:
        return -math.inf if digits.startswith("-") else math.inf


def score_blood_pressure(systolic: Any, diastolic: Any) -> ScoreResult:
    """Score 0-3. Rules are checked in order and the first match wins."""
    s = parse_number(systolic)
    d = parse_number(diastolic)
    if s is None or d is None:
        return _ISSUE

    if s >= 140 or d >= 90:
        return ScoreResult(score=3, issue=False)  # Stage 2
    if 130 <= s <= 139 or 80 <= d <= 89:
        return ScoreResult(score=2, issue=False)  # Stage 1
    if 120 <= s <= 129 and d < 80:
        return ScoreResult(score=1, issue=False)  # Elevated
    if s < 120 and d < 80:
        return ScoreResult(score=0, issue=False)  # Normal
    # fractional readings between bands, e.g. 139.5/85
    return _ISSUE


def score_temperature(temperature: Any) -> ScoreResult:
    t = parse_number(temperature)
    if t is None:
        return _ISSUE

    if t >= 101.0:
        return ScoreResult(score=2, issue=False)
    if 99.6 <= t <= 100.9:
        return ScoreResult(score=1, issue=False)
    if t <= 99.5:
        return ScoreResult(score=0, issue=False)
    return _ISSUE


def score_age(age: Any) -> ScoreResult:
    # Negative and zero ages are scored like any other age under 40.
    a = parse_integer(age)
    if a is None:
        return _ISSUE

    if a > 65:
        return ScoreResult(score=2, issue=False)
    if 40 <= a <= 65:
        return ScoreResult(score=1, issue=False)
    if a < 40:
        return ScoreResult(score=0, issue=False)
    return _ISSUE
