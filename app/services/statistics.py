"""
Statistical aggregation over survey responses.

Pure functions only. Missing answers are skipped (never counted in a
denominator) and every ratio is guarded so empty input yields 0 rather than
NaN or an exception.
"""
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from app.core.survey_fields import LIKERT_FIELDS, LikertField
from app.schemas.stats import DescriptiveStats, EnpsResult

T = TypeVar("T")

NOT_INFORMED = "Não informado"

PROMOTER_MIN = 9
PASSIVE_MIN = 7
FAVORABLE_MIN = 4


def calculate_enps(surveys: Iterable[Any]) -> EnpsResult:
    answers = [s.enps for s in surveys if s.enps is not None]
    total = len(answers)
    if total == 0:
        return EnpsResult()

    promoters = sum(1 for a in answers if a >= PROMOTER_MIN)
    passives = sum(1 for a in answers if PASSIVE_MIN <= a < PROMOTER_MIN)
    detractors = sum(1 for a in answers if a < PASSIVE_MIN)

    score = (promoters - detractors) / total * 100
    return EnpsResult(
        score=round(score, 2),
        promoters=promoters,
        passives=passives,
        detractors=detractors,
        total=total,
    )


def enps_percentages(enps: EnpsResult) -> Dict[str, float]:
    if enps.total == 0:
        return {"promoters_percent": 0.0, "passives_percent": 0.0, "detractors_percent": 0.0}
    return {
        "promoters_percent": round(enps.promoters / enps.total * 100, 1),
        "passives_percent": round(enps.passives / enps.total * 100, 1),
        "detractors_percent": round(enps.detractors / enps.total * 100, 1),
    }


def calculate_favorability(
    surveys: Iterable[Any],
    fields: Sequence[LikertField] = LIKERT_FIELDS,
) -> float:
    """Share of answered Likert items rated 4 or 5, counted item by item."""
    total = 0
    favorable = 0
    for survey in surveys:
        for field in fields:
            value = field.value_of(survey)
            if value is not None:
                total += 1
                if value >= FAVORABLE_MIN:
                    favorable += 1

    if total == 0:
        return 0.0
    return round(favorable / total * 100, 2)


def calculate_averages(
    surveys: Iterable[Any],
    fields: Sequence[LikertField] = LIKERT_FIELDS,
) -> Dict[str, float]:
    sums = {f.key: 0 for f in fields}
    counts = {f.key: 0 for f in fields}
    for survey in surveys:
        for field in fields:
            value = field.value_of(survey)
            if value is not None:
                sums[field.key] += value
                counts[field.key] += 1

    return {
        key: round(sums[key] / counts[key], 2) if counts[key] > 0 else 0.0
        for key in sums
    }


def field_values(surveys: Iterable[Any], field: LikertField) -> List[int]:
    return [v for v in (field.value_of(s) for s in surveys) if v is not None]


def descriptive_stats(values: Sequence[float]) -> DescriptiveStats:
    if len(values) == 0:
        return DescriptiveStats()

    arr = np.asarray(values, dtype=float)
    return DescriptiveStats(
        mean=round(float(arr.mean()), 2),
        median=round(float(np.median(arr)), 2),
        min=float(arr.min()),
        max=float(arr.max()),
        std_dev=round(float(arr.std()), 2),  # population (ddof=0)
        count=int(arr.size),
    )


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson's r over paired samples. Returns exactly 0.0 for empty input,
    mismatched lengths, or when either side is constant.
    """
    n = len(x)
    if n == 0 or n != len(y):
        return 0.0

    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    # Exact zero-variance test; a float variance near 0 would divide garbage
    if xa.max() == xa.min() or ya.max() == ya.min():
        return 0.0

    dx = xa - xa.mean()
    dy = ya - ya.mean()
    denominator = float(np.sqrt(np.dot(dx, dx) * np.dot(dy, dy)))
    if denominator == 0:
        return 0.0

    r = float(np.dot(dx, dy)) / denominator
    return max(-1.0, min(1.0, r))


def paired_values(
    surveys: Iterable[Any],
    first: LikertField,
    second: LikertField,
) -> Tuple[List[int], List[int]]:
    xs: List[int] = []
    ys: List[int] = []
    for survey in surveys:
        a = first.value_of(survey)
        b = second.value_of(survey)
        if a is not None and b is not None:
            xs.append(a)
            ys.append(b)
    return xs, ys


def correlation_matrix(
    surveys: Sequence[Any],
    fields: Sequence[LikertField],
) -> Dict[str, Dict[str, float]]:
    matrix: Dict[str, Dict[str, float]] = {}
    for first in fields:
        row: Dict[str, float] = {}
        for second in fields:
            xs, ys = paired_values(surveys, first, second)
            row[second.key] = round(pearson_correlation(xs, ys), 3)
        matrix[first.key] = row
    return matrix


def category_of(value: Optional[str]) -> str:
    return value if value else NOT_INFORMED


def group_by(items: Iterable[T], key: Callable[[T], Optional[str]]) -> Dict[str, List[T]]:
    """Partition items by a categorical key; empty or missing keys share one bucket."""
    groups: Dict[str, List[T]] = defaultdict(list)
    for item in items:
        groups[category_of(key(item))].append(item)
    return dict(groups)


def group_count(items: Iterable[T], key: Callable[[T], Optional[str]]) -> Dict[str, int]:
    return {group: len(members) for group, members in group_by(items, key).items()}


def value_counts(values: Iterable[int], domain: Iterable[int]) -> Dict[int, int]:
    counts = {v: 0 for v in domain}
    for value in values:
        if value in counts:
            counts[value] += 1
    return counts
