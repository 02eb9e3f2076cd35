"""Assertion helpers for bundle bodies.

They raise ContractAssertionError so a failure keeps its expected and actual
values even outside pytest's assertion rewriting.
"""

from typing import Any

from vehiclekit.harness.errors import ContractAssertionError


def assert_equal(actual: Any, expected: Any, what: str = "value") -> None:
    if actual != expected:
        raise ContractAssertionError(
            f"expected {what} to be {expected!r}, got {actual!r}",
            expected=expected,
            actual=actual,
        )


def assert_true(actual: Any, what: str = "value") -> None:
    if actual is not True:
        raise ContractAssertionError(
            f"expected {what} to be True, got {actual!r}",
            expected=True,
            actual=actual,
        )


def assert_false(actual: Any, what: str = "value") -> None:
    if actual is not False:
        raise ContractAssertionError(
            f"expected {what} to be False, got {actual!r}",
            expected=False,
            actual=actual,
        )


def assert_lacks(subject: Any, attribute: str) -> None:
    """Fail if the subject exposes the given attribute."""
    if hasattr(subject, attribute):
        raise ContractAssertionError(
            f"expected {subject!r} not to respond to {attribute!r}",
            expected=f"no {attribute}",
            actual=attribute,
        )
