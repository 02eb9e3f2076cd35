"""Command-line entrypoint: check every vehicle against the shared contracts."""

import logging
import sys

from vehiclekit.contracts import START_STOP, WHEELED, build_registry
from vehiclekit.domain.vehicles import Bike, Boat, Car
from vehiclekit.harness.runner import ContractRunner, SubjectPlan
from vehiclekit.logging import setup_logging

logger = logging.getLogger(__name__)


def vehicle_plans() -> list[SubjectPlan]:
    """One plan per variant, with the wheel count each must report."""
    return [
        SubjectPlan("Bike", lambda: Bike("Trek", "FX 3"))
        .behaves_like(START_STOP)
        .behaves_like(WHEELED, 2),
        SubjectPlan("Car", lambda: Car("Toyota", "Corolla"))
        .behaves_like(START_STOP)
        .behaves_like(WHEELED, 4),
        SubjectPlan("Boat", lambda: Boat("Yamaha", "242X"))
        .behaves_like(START_STOP)
        .behaves_like(WHEELED, 0),
    ]


def main() -> int:
    """Run the vehicle contracts, print the summary, return the exit code."""
    setup_logging()
    logger.info("Checking vehicle contracts")

    summary = ContractRunner(build_registry()).run(vehicle_plans())
    print(summary.format())
    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
