"""
Domain models for the customer importer.

`ImportOptions` replaces variadic option setters with an explicit, immutable
configuration record. `DomainCount` is the unit of the aggregation result.
`AggregationState` is the mutable per-run state owned by a single
`RecordAggregator.run` call.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Set

from pydantic import BaseModel, Field

Row = List[str]


class ImportOptions(BaseModel):
    """
    Flags controlling which per-row errors are skipped instead of raised.
    """

    skip_invalid_emails: bool = Field(
        False, description="Ignore rows whose email fails syntactic validation."
    )
    skip_duplicate_emails: bool = Field(
        False, description="Ignore rows whose email was already counted in this run."
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class DomainCount(BaseModel):
    """
    Number of distinct valid emails seen for one domain.
    """

    domain: str = Field(..., min_length=1, description="Text following the '@'.")
    count: int = Field(..., ge=1, description="Distinct emails counted for the domain.")

    model_config = {
        "frozen": True,
    }


@dataclass
class AggregationState:
    """Mutable state of one aggregation run."""

    seen_emails: Set[str] = field(default_factory=set)
    domain_counter: Counter = field(default_factory=Counter)
    line: int = 0
    rows_processed: int = 0
    skipped_invalid: int = 0
    skipped_duplicate: int = 0


class ImportSummary(BaseModel):
    """Counters reported after a successful run."""

    rows_processed: int = 0
    rows_counted: int = 0
    skipped_invalid: int = 0
    skipped_duplicate: int = 0
    domains: int = 0

    model_config = {
        "frozen": True,
    }


__all__ = ["Row", "ImportOptions", "DomainCount", "AggregationState", "ImportSummary"]
