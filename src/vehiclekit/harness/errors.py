"""Errors raised by the shared-bundle harness."""


class HarnessError(Exception):
    """Base class for harness errors."""


class SharedExampleNotFoundError(HarnessError, LookupError):
    """Raised when no bundle is registered under the requested name."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"No shared {kind} registered as {name!r}")
        self.kind = kind
        self.name = name


class ArgumentCountError(HarnessError, TypeError):
    """Raised when a bundle is applied with the wrong number of arguments."""

    def __init__(self, name: str, expected: int, received: int) -> None:
        super().__init__(
            f"Shared example {name!r} takes {expected} argument(s), "
            f"{received} given"
        )
        self.name = name
        self.expected = expected
        self.received = received


class DuplicateNameError(HarnessError, ValueError):
    """Raised by a strict registry when a name is registered twice."""


class RegistryFrozenError(HarnessError, RuntimeError):
    """Raised when registering into a registry that has been frozen."""


class ContractAssertionError(AssertionError):
    """Assertion failure that remembers the expected and actual values."""

    def __init__(self, message: str, *, expected: object, actual: object) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ContextError(HarnessError, RuntimeError):
    """Raised when the setup or teardown half of a shared context fails."""

    def __init__(self, name: str, phase: str, reason: str) -> None:
        super().__init__(f"Shared context {name!r} {phase} failed: {reason}")
        self.name = name
        self.phase = phase
