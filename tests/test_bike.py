"""
Bike checked against the shared vehicle contracts.
"""

from __future__ import annotations

import pytest

from vehiclekit.contracts import START_STOP, WHEELED, build_registry
from vehiclekit.domain.vehicles import Bike
from vehiclekit.harness.pytest_support import it_behaves_like

REGISTRY = build_registry()


@pytest.fixture
def subject() -> Bike:
    return Bike("Trek", "FX 3")


test_start_and_stop = it_behaves_like(REGISTRY, START_STOP)
test_wheels = it_behaves_like(REGISTRY, WHEELED, 2)


def test_does_not_have_a_fuel_tank(subject: Bike) -> None:
    assert not hasattr(subject, "fuel_level")


def test_can_be_started_and_stopped_multiple_times(subject: Bike) -> None:
    for _ in range(3):
        subject.start()
        subject.stop()
    assert subject.is_started() is False
