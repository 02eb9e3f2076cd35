"""Outcome records for bundle applications and whole runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MISSING: Any = object()


class Outcome(Enum):
    """Enumeration for the outcome of a single assertion."""

    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


@dataclass(frozen=True)
class AssertionResult:
    example: str
    description: str
    subject: str
    outcome: Outcome
    message: str = ""
    expected: Any = MISSING
    actual: Any = MISSING

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED

    @property
    def has_values(self) -> bool:
        """True when the failure recorded both expected and actual values."""
        return self.expected is not MISSING and self.actual is not MISSING

    def describe(self) -> str:
        line = (
            f"{self.example} {self.description} [{self.subject}]: "
            f"{self.outcome.value}"
        )
        if self.passed:
            return line
        if self.has_values:
            line += f"\n    expected: {self.expected!r}\n    actual:   {self.actual!r}"
        if self.message:
            line += f"\n    {self.message}"
        return line


@dataclass
class ExampleGroupResult:
    """Results of applying one shared example to one subject."""

    example: str
    subject: str
    results: list[AssertionResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[AssertionResult]:
        return [r for r in self.results if not r.passed]

    def __len__(self) -> int:
        return len(self.results)


@dataclass
class RunSummary:
    """Every group result of one runner pass."""

    groups: list[ExampleGroupResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(len(g) for g in self.groups)

    @property
    def failures(self) -> list[AssertionResult]:
        return [r for g in self.groups for r in g.failures]

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def format(self) -> str:
        failures = self.failures
        lines = [f"{self.total} assertions, {len(failures)} failures"]
        if failures:
            lines.append("")
            lines.append("Failures:")
            lines.extend(f"  {f.describe()}" for f in failures)
        return "\n".join(lines)
