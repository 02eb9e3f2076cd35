"""Shared examples and contexts every vehicle variant is checked against."""

from collections.abc import Generator

from vehiclekit.harness.assertions import assert_equal, assert_false, assert_true
from vehiclekit.harness.capabilities import Startable, Wheeled
from vehiclekit.harness.registry import SharedRegistry

START_STOP = "a vehicle that can start and stop"
WHEELED = "a wheeled vehicle"
STARTED = "with a started vehicle"


def register_vehicle_contracts(registry: SharedRegistry) -> SharedRegistry:
    """Define the vehicle bundles on `registry` and return it."""

    @registry.shared_examples(START_STOP)
    def _start_stop(it):
        @it("can start")
        def can_start(subject: Startable) -> None:
            subject.start()
            assert_true(subject.is_started(), "started")

        @it("can stop")
        def can_stop(subject: Startable) -> None:
            subject.start()
            subject.stop()
            assert_false(subject.is_started(), "started")

        @it("stays started when started twice")
        def stays_started_when_started_twice(subject: Startable) -> None:
            subject.start()
            subject.start()
            assert_true(subject.is_started(), "started")

        @it("can be started and stopped multiple times")
        def cycles_start_and_stop(subject: Startable) -> None:
            for _round in range(3):
                subject.start()
                subject.stop()
            assert_false(subject.is_started(), "started")

    @registry.shared_examples(WHEELED)
    def _wheeled(it, expected_wheels):
        @it("has the correct number of wheels")
        def has_correct_wheel_count(subject: Wheeled) -> None:
            assert_equal(subject.wheel_count(), expected_wheels, "wheel count")

        @it("keeps its wheel count after starting and stopping")
        def keeps_wheel_count(subject: Wheeled) -> None:
            if isinstance(subject, Startable):
                subject.start()
                subject.stop()
            assert_equal(subject.wheel_count(), expected_wheels, "wheel count")

    @registry.shared_context(STARTED)
    def _started(subject: Startable) -> Generator[None, None, None]:
        subject.start()
        yield
        subject.stop()

    return registry


def build_registry(strict: bool | None = None) -> SharedRegistry:
    """Return a frozen registry holding the vehicle contracts."""
    registry = register_vehicle_contracts(SharedRegistry(strict=strict))
    registry.freeze()
    return registry
