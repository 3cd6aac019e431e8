"""Loan application records, CSV loading and feature scaling helpers."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FIELD_COUNT = 7
_OWNER_FLAGS = frozenset({"E", "e"})


@dataclass
class Application:
    """A single loan application together with its approval outcome."""

    id: int
    age: int
    income: int
    credit_score: int
    home_owner: str
    work_years: int
    approved: int

    def features(self) -> list[float]:
        """Numeric feature vector: age, income, credit score, ownership, work years."""
        return [
            float(self.age),
            float(self.income),
            float(self.credit_score),
            float(owner_to_int(self.home_owner)),
            float(self.work_years),
        ]


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {match.group(1)}")
    return value


def _parse_line(line: str) -> Application:
    fields = line.split(",")
    if len(fields) < _FIELD_COUNT:
        raise ValueError(f"expected {_FIELD_COUNT} fields, got {len(fields)}")
    owner = fields[4]
    return Application(
        id=_parse_int(fields[0]),
        age=_parse_int(fields[1]),
        income=_parse_int(fields[2]),
        credit_score=_parse_int(fields[3]),
        home_owner=owner[0] if owner else "H",
        work_years=_parse_int(fields[5]),
        approved=_parse_int(fields[6]),
    )


def read_applications(path: str | PathLike[str]) -> list[Application]:
    """Read applications from a CSV file with a header line.

    Malformed lines are logged and skipped. A missing file raises ``OSError``.
    """
    applications: list[Application] = []
    with open(path, encoding="utf-8", newline="") as handle:
        next(handle, None)
        for raw in handle:
            line = raw.rstrip("\n")
            try:
                applications.append(_parse_line(line))
            except ValueError as exc:
                logger.warning("Hatali satir atlandi: %s (%s)", line, exc)
    return applications


def owner_to_int(flag: str) -> int:
    """Map 'E'/'e' (home owner) to 1 and anything else to 0."""
    is_owner = flag in _OWNER_FLAGS
    return int(is_owner)


def _scale(row: Sequence[float], mins: Sequence[float], maxs: Sequence[float]) -> list[float]:
    return [
        (value - lo) / (hi - lo) if hi != lo else 0.5
        for value, lo, hi in zip(row, mins, maxs)
    ]


def normalize_features(
    rows: Sequence[Sequence[float]],
) -> tuple[list[list[float]], list[float], list[float]]:
    """Min-max scale ``rows`` column by column.

    Returns the scaled rows and the per-column minima and maxima. Columns
    holding a single value are set to 0.5.
    """
    if not rows:
        return [], [], []
    columns = list(zip(*rows))
    mins = [min(column) for column in columns]
    maxs = [max(column) for column in columns]
    return [_scale(row, mins, maxs) for row in rows], mins, maxs


def apply_normalization(
    rows: Sequence[Sequence[float]],
    mins: Sequence[float],
    maxs: Sequence[float],
) -> list[list[float]]:
    """Scale ``rows`` with minima and maxima learned elsewhere."""
    if not rows or not mins or not maxs:
        return [list(row) for row in rows]
    return [_scale(row, mins, maxs) for row in rows]


def class_distribution_summary(labels: Iterable[int]) -> str:
    """Describe how many labels are positive (1) and negative."""
    labels = list(labels)
    positive = sum(1 for label in labels if label == 1)
    total = len(labels)
    share = positive / total * 100 if total else math.nan
    return f"Sınıf Dağılımı: {positive} pozitif, {total - positive} negatif ({share:.1f}%)"