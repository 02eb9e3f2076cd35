"""pytest glue: turn shared bundles into collected tests and fixtures.

Usage in a test module::

    REGISTRY = build_registry()

    @pytest.fixture
    def subject():
        return Bike("Trek", "FX 3")

    test_start_stop = it_behaves_like(REGISTRY, "a vehicle that can start and stop")
    test_wheels = it_behaves_like(REGISTRY, "a wheeled vehicle", 2)
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterable
from contextlib import ExitStack
from typing import Any

import pytest

from vehiclekit.harness.bundles import Assertion
from vehiclekit.harness.registry import SharedRegistry


def it_behaves_like(
    registry: SharedRegistry,
    name: str,
    *args: Any,
    contexts: Iterable[str] = (),
) -> Callable[..., None]:
    """
    Build a test function that runs each assertion of a shared example.

    The test is parametrized over the bundle's assertions, ids being the
    assertion descriptions, and checks them against the `subject` fixture.
    Unknown names and wrong argument counts fail at collection time.
    """
    assertions = registry.get_example(name).build(*args)
    shared_contexts = [registry.get_context(c) for c in contexts]

    @pytest.mark.parametrize(
        "assertion", assertions, ids=[a.description for a in assertions]
    )
    def test_shared_example(subject: Any, assertion: Assertion) -> None:
        with ExitStack() as stack:
            for context in shared_contexts:
                stack.enter_context(context.enter(subject))
            assertion(subject)

    test_shared_example.__doc__ = f"it behaves like {name}"
    return test_shared_example


def include_context(
    registry: SharedRegistry,
    name: str,
    *,
    fixture_name: str | None = None,
    autouse: bool = False,
) -> Callable[..., Generator[Any, None, None]]:
    """Build a fixture that applies a shared context to `subject`.

    Assign the result at module level and request the fixture in the tests
    that need the context. Teardown runs after each test.
    """
    context = registry.get_context(name)

    @pytest.fixture(name=fixture_name, autouse=autouse)
    def _shared_context(subject: Any) -> Generator[Any, None, None]:
        with context.enter(subject) as prepared:
            yield prepared

    return _shared_context
