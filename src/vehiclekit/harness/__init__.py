from .bundles import AppliedContext, Assertion, SharedContext, SharedExample
from .errors import (
    ArgumentCountError,
    ContractAssertionError,
    DuplicateNameError,
    HarnessError,
    RegistryFrozenError,
    SharedExampleNotFoundError,
)
from .registry import SharedRegistry
from .results import AssertionResult, ExampleGroupResult, Outcome, RunSummary
from .runner import ContractRunner, SubjectPlan

__all__ = [
    "SharedRegistry",
    "SharedExample",
    "SharedContext",
    "AppliedContext",
    "Assertion",
    "ContractRunner",
    "SubjectPlan",
    "AssertionResult",
    "ExampleGroupResult",
    "Outcome",
    "RunSummary",
    "HarnessError",
    "SharedExampleNotFoundError",
    "ArgumentCountError",
    "DuplicateNameError",
    "RegistryFrozenError",
    "ContractAssertionError",
]
