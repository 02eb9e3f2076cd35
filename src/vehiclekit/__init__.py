"""Vehicle domain model plus a shared-contract test harness."""

__version__ = "0.1.0"
