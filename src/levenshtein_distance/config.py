from __future__ import annotations

"""Reference-case schema models and data-loading utilities."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .distance import levenshtein_distance

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
REFERENCE_CASES_PATH = DATA_DIR / "reference_cases.yaml"


class ReferenceCase(BaseModel):
    """One known pair of inputs and the distance between them."""

    name: str
    a: str
    b: str
    distance: int = Field(ge=0)
    note: Optional[str] = None


class ReferenceSuite(BaseModel):
    """Top-level reference-case file."""

    version: int
    cases: List[ReferenceCase]

    @field_validator("cases")
    @classmethod
    def _unique_names(cls, cases: List[ReferenceCase]) -> List[ReferenceCase]:
        seen: set[str] = set()
        for case in cases:
            if case.name in seen:
                raise ValueError(f"duplicate case name '{case.name}'")
            seen.add(case.name)
        return cases


class ReferenceCasesNotFoundError(FileNotFoundError):
    """Raised when a reference-case file cannot be located."""


def load_reference_cases(path: Path = REFERENCE_CASES_PATH) -> List[ReferenceCase]:
    """Load and validate the reference cases stored at *path*."""

    if not path.exists():
        raise ReferenceCasesNotFoundError(f"No reference cases at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    try:
        suite = ReferenceSuite.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid reference cases in {path}: {exc}") from exc
    logger.debug("Loaded %d reference cases from %s", len(suite.cases), path)
    return suite.cases


def verify_reference_cases(
    cases: Optional[Iterable[ReferenceCase]] = None,
) -> List[ReferenceCase]:
    """Return the cases whose computed distance disagrees with the recorded one."""

    if cases is None:
        cases = load_reference_cases()
    mismatches: List[ReferenceCase] = []
    for case in cases:
        computed = levenshtein_distance(case.a, case.b)
        if computed != case.distance:
            logger.warning(
                "Reference case %s: expected %d, computed %d",
                case.name,
                case.distance,
                computed,
            )
            mismatches.append(case)
    return mismatches
