"""
Validation report models

Written as JSON by the command line tool; one entry per validated value.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from .status import Status


class ValueResult(BaseModel):
    """
    Outcome for a single value

    Attributes:
        line: 1-based line number in the values file
        value: Value as read
        status: Public match status
        accepted: Whether the value passes (commit: complete or empty;
                  autofill: anything but error/syntax)
        text: Value after case normalisation and autofill
    """
    line: int
    value: str
    status: Status
    accepted: bool
    text: str


class ValidationReport(BaseModel):
    """
    Report for one values file

    Attributes:
        picture: Picture mask used
        mode: "commit" or "interactive"
        results: Per-value outcomes
    """
    picture: str
    mode: str
    results: List[ValueResult] = Field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return sum(1 for result in self.results if result.accepted)

    @property
    def rejected_count(self) -> int:
        return len(self.results) - self.accepted_count

    def statusCounts_get(self) -> Dict[str, int]:
        """Number of values per status"""
        counts: Dict[str, int] = {}
        for result in self.results:
            counts[result.status.value] = counts.get(result.status.value, 0) + 1
        return counts
