"""Registry of shared examples and shared contexts.

A registry is populated while test modules load, frozen, and then only read.
It is an explicit object handed to whoever applies the bundles.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from contextlib import ExitStack
from types import MappingProxyType
from typing import Any

from vehiclekit.harness.bundles import (
    AppliedContext,
    Assertion,
    ContextSetup,
    ExampleBody,
    SharedContext,
    SharedExample,
)
from vehiclekit.harness.errors import (
    ContextError,
    DuplicateNameError,
    RegistryFrozenError,
    SharedExampleNotFoundError,
)
from vehiclekit.harness.results import (
    MISSING,
    AssertionResult,
    ExampleGroupResult,
    Outcome,
)

logger = logging.getLogger(__name__)

STRICT_ENV_VAR = "VEHICLEKIT_STRICT_REGISTRY"


def _strict_from_env() -> bool:
    return os.getenv(STRICT_ENV_VAR, "").strip().lower() in ("true", "1", "yes")


def _errored(
    example: str, description: str, label: str, message: str
) -> AssertionResult:
    return AssertionResult(
        example=example,
        description=description,
        subject=label,
        outcome=Outcome.ERRORED,
        message=message,
    )


def run_assertion(
    example: str,
    assertion: Assertion,
    subject: Any,
    label: str | None = None,
    contexts: Iterable[SharedContext] = (),
) -> AssertionResult:
    """Run one assertion and record its outcome instead of raising.

    `contexts` are set up before the assertion and torn down after it. A
    context that fails either half turns the result into ERRORED.
    """
    label = label or repr(subject)
    try:
        with ExitStack() as stack:
            for context in contexts:
                stack.enter_context(context.enter(subject))
            result = _check(example, assertion, subject, label)
    except ContextError as e:
        logger.debug("Assertion %r errored on %s: %s", assertion.description, label, e)
        return _errored(example, assertion.description, label, str(e))
    return result


def _check(
    example: str, assertion: Assertion, subject: Any, label: str
) -> AssertionResult:
    try:
        assertion(subject)
    except AssertionError as e:
        return AssertionResult(
            example=example,
            description=assertion.description,
            subject=label,
            outcome=Outcome.FAILED,
            message=str(e),
            expected=getattr(e, "expected", MISSING),
            actual=getattr(e, "actual", MISSING),
        )
    except Exception as e:
        logger.debug("Assertion %r errored on %s", assertion.description, label)
        return _errored(
            example, assertion.description, label, f"{type(e).__name__}: {e}"
        )
    return AssertionResult(
        example=example,
        description=assertion.description,
        subject=label,
        outcome=Outcome.PASSED,
    )


class SharedRegistry:
    """Named shared examples and shared contexts, in separate namespaces."""

    def __init__(self, *, strict: bool | None = None) -> None:
        self._examples: (
            dict[str, SharedExample] | MappingProxyType[str, SharedExample]
        ) = {}
        self._contexts: (
            dict[str, SharedContext] | MappingProxyType[str, SharedContext]
        ) = {}
        self._frozen = False
        self.strict = _strict_from_env() if strict is None else strict

    # ----------------------------
    # Registration
    # ----------------------------
    def define_shared_example(self, name: str, body: ExampleBody) -> SharedExample:
        """Register an assertion bundle under `name`.

        Re-registering a name replaces the earlier bundle, unless the
        registry is strict.
        """
        example = SharedExample(name, body)
        self._store("example", self._examples, name, example)
        return example

    def define_shared_context(self, name: str, setup: ContextSetup) -> SharedContext:
        """Register a setup procedure under `name`."""
        context = SharedContext(name, setup)
        self._store("context", self._contexts, name, context)
        return context

    def shared_examples(self, name: str) -> Callable[[ExampleBody], ExampleBody]:
        """Decorator form of define_shared_example."""

        def decorator(body: ExampleBody) -> ExampleBody:
            self.define_shared_example(name, body)
            return body

        return decorator

    def shared_context(self, name: str) -> Callable[[ContextSetup], ContextSetup]:
        """Decorator form of define_shared_context."""

        def decorator(setup: ContextSetup) -> ContextSetup:
            self.define_shared_context(name, setup)
            return setup

        return decorator

    def _store(self, kind: str, namespace: Any, name: str, bundle: Any) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register shared {kind} {name!r}: registry is frozen"
            )
        if name in namespace:
            if self.strict:
                raise DuplicateNameError(
                    f"Shared {kind} {name!r} is already registered"
                )
            logger.warning("Shared %s %r re-registered, replacing it", kind, name)
        namespace[name] = bundle
        logger.debug("Registered shared %s %r", kind, name)

    def freeze(self) -> None:
        """End the registration phase. Lookups stay available."""
        if self._frozen:
            return
        self._examples = MappingProxyType(dict(self._examples))
        self._contexts = MappingProxyType(dict(self._contexts))
        self._frozen = True
        logger.info(
            "Registry frozen with %d shared examples and %d shared contexts",
            len(self._examples),
            len(self._contexts),
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ----------------------------
    # Lookup
    # ----------------------------
    def get_example(self, name: str) -> SharedExample:
        try:
            return self._examples[name]
        except KeyError:
            raise SharedExampleNotFoundError("example", name) from None

    def get_context(self, name: str) -> SharedContext:
        try:
            return self._contexts[name]
        except KeyError:
            raise SharedExampleNotFoundError("context", name) from None

    def example_names(self) -> tuple[str, ...]:
        return tuple(self._examples)

    def context_names(self) -> tuple[str, ...]:
        return tuple(self._contexts)

    def __contains__(self, name: object) -> bool:
        return name in self._examples or name in self._contexts

    # ----------------------------
    # Application
    # ----------------------------
    def apply_shared_context(self, name: str, subject: Any) -> AppliedContext:
        """Run the named setup against `subject` now.

        Returns:
            AppliedContext: call teardown() or use it in a with-block to
            run the teardown half
        """
        context = self.get_context(name)
        logger.debug("Applying shared context %r to %r", name, subject)
        return context.enter(subject)

    def apply_shared_example(
        self,
        name: str,
        subject: Any,
        *args: Any,
        contexts: Iterable[str] = (),
    ) -> ExampleGroupResult:
        """
        Run every assertion of the named bundle against `subject`.

        Assertions run in declaration order. A failing assertion is recorded
        and its siblings still run. A context whose setup fails marks every
        assertion ERRORED; a failing teardown adds one ERRORED record.

        Args:
            name: Registered shared example name
            subject: Object the assertions are checked against
            *args: Values for the bundle's declared parameters
            contexts: Shared context names applied before the assertions

        Returns:
            ExampleGroupResult: one AssertionResult per assertion

        Raises:
            SharedExampleNotFoundError: if a bundle or context is unknown
            ArgumentCountError: if args do not match the declared parameters
        """
        example = self.get_example(name)
        assertions = example.build(*args)
        shared_contexts = [self.get_context(c) for c in contexts]

        label = repr(subject)
        group = ExampleGroupResult(example=name, subject=label)
        try:
            with ExitStack() as stack:
                for context in shared_contexts:
                    stack.enter_context(context.enter(subject))
                for assertion in assertions:
                    group.results.append(run_assertion(name, assertion, subject))
        except ContextError as e:
            if e.phase == "setup":
                # Nothing ran, so every assertion is reported as errored
                group.results = [
                    _errored(name, a.description, label, str(e)) for a in assertions
                ]
            else:
                description = f"teardown of shared context {e.name!r}"
                group.results.append(_errored(name, description, label, str(e)))

        for failure in group.failures:
            logger.warning(
                "%s %s failed for %s: %s",
                name,
                failure.description,
                failure.subject,
                failure.message,
            )
        return group
