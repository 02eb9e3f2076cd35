"""Run shared bundles against many subjects and summarize the outcome."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from vehiclekit.harness.registry import SharedRegistry, run_assertion
from vehiclekit.harness.results import ExampleGroupResult, RunSummary

logger = logging.getLogger(__name__)


@dataclass
class SubjectPlan:
    """What to run against one kind of subject.

    `factory` is called once per assertion so every assertion starts from a
    fresh subject.
    """

    label: str
    factory: Callable[[], Any]
    examples: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    contexts: list[str] = field(default_factory=list)

    def behaves_like(self, name: str, *args: Any) -> SubjectPlan:
        self.examples.append((name, args))
        return self

    def include_context(self, name: str) -> SubjectPlan:
        self.contexts.append(name)
        return self


class ContractRunner:
    """Applies registered bundles to subjects, sequentially in plan order."""

    def __init__(self, registry: SharedRegistry) -> None:
        registry.freeze()
        self._registry = registry

    @property
    def registry(self) -> SharedRegistry:
        return self._registry

    def run(self, plans: Iterable[SubjectPlan]) -> RunSummary:
        summary = RunSummary()
        for plan in plans:
            logger.info(
                "Running %d shared examples for %s", len(plan.examples), plan.label
            )
            for name, args in plan.examples:
                summary.groups.append(self._run_group(plan, name, args))

        if summary.passed:
            logger.info("All %d assertions passed", summary.total)
        else:
            logger.warning(
                "%d of %d assertions failed", len(summary.failures), summary.total
            )
        return summary

    def _run_group(
        self, plan: SubjectPlan, name: str, args: Sequence[Any]
    ) -> ExampleGroupResult:
        # Lookup and arity errors surface here, before any subject is built
        assertions = self._registry.get_example(name).build(*args)
        contexts = [self._registry.get_context(c) for c in plan.contexts]

        group = ExampleGroupResult(example=name, subject=plan.label)
        for assertion in assertions:
            result = run_assertion(
                name, assertion, plan.factory(), label=plan.label, contexts=contexts
            )
            group.results.append(result)
            if not result.passed:
                logger.warning(
                    "%s %s failed for %s: %s",
                    name,
                    assertion.description,
                    plan.label,
                    result.message,
                )
        return group
