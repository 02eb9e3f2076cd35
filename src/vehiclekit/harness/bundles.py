"""Shared example and shared context bundles."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any

from vehiclekit.harness.errors import ArgumentCountError, ContextError

AssertionFn = Callable[[Any], None]
ExampleBody = Callable[..., None]
ContextSetup = Callable[[Any], Generator[None, None, None] | None]


@dataclass(frozen=True)
class Assertion:
    """One named check, run against whatever subject it is given."""

    description: str
    check: AssertionFn

    def __call__(self, subject: Any) -> None:
        self.check(subject)


class _Collector:
    """The `it` argument handed to a bundle body."""

    def __init__(self) -> None:
        self.assertions: list[Assertion] = []

    def __call__(self, description: str) -> Callable[[AssertionFn], AssertionFn]:
        def decorator(fn: AssertionFn) -> AssertionFn:
            self.assertions.append(Assertion(description, fn))
            return fn

        return decorator


class SharedExample:
    """A named bundle of assertions, optionally parameterized.

    The body is called as ``body(it, *params)`` and declares its assertions
    with ``@it("description")``. Every parameter after ``it`` is a declared
    parameter and must be supplied positionally when the bundle is applied.
    """

    def __init__(self, name: str, body: ExampleBody) -> None:
        params = list(inspect.signature(body).parameters.values())
        if not params or any(
            p.kind not in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) for p in params
        ):
            raise TypeError(
                f"Shared example {name!r} body must take `it` followed by "
                "positional parameters only"
            )
        self.name = name
        self.body = body
        self.params: tuple[str, ...] = tuple(p.name for p in params[1:])

    @property
    def arity(self) -> int:
        return len(self.params)

    def build(self, *args: Any) -> list[Assertion]:
        """Bind the arguments and return the assertions the body declares.

        Raises:
            ArgumentCountError: if len(args) differs from the declared params
        """
        if len(args) != self.arity:
            raise ArgumentCountError(self.name, self.arity, len(args))
        collector = _Collector()
        self.body(collector, *args)
        return collector.assertions

    def __repr__(self) -> str:
        return f"SharedExample({self.name!r}, params={self.params})"


class SharedContext:
    """A named setup procedure, with optional teardown.

    A plain function is setup only. A generator function runs up to its
    single ``yield`` as setup and resumes after it as teardown.
    """

    def __init__(self, name: str, setup: ContextSetup) -> None:
        self.name = name
        self.setup = setup

    @property
    def has_teardown(self) -> bool:
        return inspect.isgeneratorfunction(self.setup)

    def enter(self, subject: Any) -> AppliedContext:
        """Run the setup half against the subject.

        Raises:
            ContextError: if the setup raises or a generator never yields
        """
        try:
            result = self.setup(subject)
            if not inspect.isgenerator(result):
                return AppliedContext(self, subject, None)
            next(result)
        except StopIteration:
            raise ContextError(self.name, "setup", "did not yield") from None
        except Exception as e:
            raise ContextError(self.name, "setup", f"{type(e).__name__}: {e}") from e
        return AppliedContext(self, subject, result)

    def __repr__(self) -> str:
        return f"SharedContext({self.name!r})"


class AppliedContext:
    """A context whose setup already ran. Teardown runs at most once."""

    def __init__(
        self,
        context: SharedContext,
        subject: Any,
        gen: Generator[None, None, None] | None,
    ) -> None:
        self.context = context
        self.subject = subject
        self._gen = gen
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def teardown(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._gen is None:
            return
        name = self.context.name
        try:
            next(self._gen)
        except StopIteration:
            return
        except Exception as e:
            raise ContextError(name, "teardown", f"{type(e).__name__}: {e}") from e
        raise ContextError(name, "teardown", "yielded twice")

    def __enter__(self) -> Any:
        return self.subject

    def __exit__(self, *exc_info: object) -> None:
        self.teardown()
