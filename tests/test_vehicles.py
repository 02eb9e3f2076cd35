"""
Unit tests for vehiclekit.domain.vehicles (Vehicle/Bike/Car/Boat).
"""

from __future__ import annotations

import logging

import pytest

from vehiclekit.domain.enums import VehicleKind
from vehiclekit.domain.vehicles import (
    LOW_FUEL_THRESHOLD,
    Bike,
    Boat,
    Car,
    Vehicle,
    create_vehicle,
)


# Vehicle is abstract-ish via wheel_count(). A minimal subclass that does NOT
# override it lets us check that the base method raises.
class _BadVehicle(Vehicle):
    pass


ALL_VARIANTS = [Bike, Car, Boat]


# Verify Vehicle.__init__ stores make/model and starts stopped.
def test_vehicle_init_sets_expected_state() -> None:
    v = Car("Toyota", "Corolla")

    assert v.make == "Toyota"
    assert v.model == "Corolla"
    assert v.started is False
    assert v.is_started() is False


# make and model are read-only properties.
def test_make_and_model_are_read_only() -> None:
    v = Bike("Trek", "FX 3")
    with pytest.raises(AttributeError):
        v.make = "Giant"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        v.model = "Escape"  # type: ignore[misc]


# Ensure the base wheel_count raises NotImplementedError when a subclass
# does not implement it.
def test_vehicle_wheel_count_base_method_raises() -> None:
    v = _BadVehicle("Nobody", "Nothing")
    with pytest.raises(NotImplementedError):
        v.wheel_count()


# Every fresh variant is stopped, and start/stop behave the same everywhere.
@pytest.mark.parametrize("vehicle_type", ALL_VARIANTS)
def test_lifecycle_is_shared_by_all_variants(vehicle_type: type[Vehicle]) -> None:
    v = vehicle_type("Make", "Model")
    assert v.is_started() is False

    v.start()
    assert v.is_started() is True

    v.stop()
    assert v.is_started() is False


# start() and stop() are idempotent: repeating them does not toggle.
@pytest.mark.parametrize("vehicle_type", ALL_VARIANTS)
def test_start_and_stop_are_idempotent(vehicle_type: type[Vehicle]) -> None:
    v = vehicle_type("Make", "Model")

    v.start()
    v.start()
    assert v.is_started() is True

    v.stop()
    v.stop()
    assert v.is_started() is False


# Wheel counts are fixed per type and do not move with any other state.
@pytest.mark.parametrize(
    ("vehicle_type", "wheels"), [(Bike, 2), (Car, 4), (Boat, 0)]
)
def test_wheel_count_per_type(vehicle_type: type[Vehicle], wheels: int) -> None:
    v = vehicle_type("Make", "Model")
    assert v.wheel_count() == wheels

    v.start()
    assert v.wheel_count() == wheels
    v.stop()
    assert v.wheel_count() == wheels


def test_kind_per_type() -> None:
    assert Bike("B", "1").kind is VehicleKind.BIKE
    assert Car("C", "1").kind is VehicleKind.CAR
    assert Boat("S", "1").kind is VehicleKind.BOAT


def test_repr_names_type_make_and_model() -> None:
    assert repr(Boat("Yamaha", "242X")) == "Boat('Yamaha', '242X')"


# Bike exposes no fuel attribute at all.
def test_bike_has_no_fuel_tank() -> None:
    b = Bike("Trek", "FX 3")
    assert not hasattr(b, "fuel_level")
    assert not hasattr(b, "refuel")


# Car starts with a full tank and refuel() tops it back up.
def test_car_refuel_scenario() -> None:
    c = Car("Toyota", "Corolla")
    assert c.fuel_level == 100

    c._fuel_level = 20
    c.refuel()
    assert c.fuel_level == 100


# refuel() on a full tank leaves it at 100, it never adds on top.
def test_car_refuel_is_not_additive() -> None:
    c = Car("Toyota", "Corolla")
    c.refuel()
    assert c.fuel_level == 100


# Cover Car fuel validation: out-of-range, bool and non-int values raise ValueError.
@pytest.mark.parametrize("fuel_level", [-1, 101, True, 50.0])
def test_car_invalid_fuel_level_raises(fuel_level: int) -> None:
    with pytest.raises(ValueError):
        Car("Toyota", "Corolla", fuel_level=fuel_level)


# Driving burns one unit per kilometre.
def test_car_drive_reduces_fuel() -> None:
    c = Car("Toyota", "Corolla")
    c.start()

    assert c.drive(30) == 30
    assert c.fuel_level == 70


# The trip stops when the tank is empty and only the covered distance is returned.
def test_car_drive_stops_when_tank_is_empty() -> None:
    c = Car("Toyota", "Corolla", fuel_level=10)
    c.start()

    assert c.drive(25) == 10
    assert c.fuel_level == 0


# Driving a stopped car, or a negative distance, is a domain rule violation.
def test_car_drive_requires_started_car() -> None:
    c = Car("Toyota", "Corolla")
    with pytest.raises(ValueError):
        c.drive(5)
    assert c.fuel_level == 100


@pytest.mark.parametrize("distance", [-1, 2.5, True])
def test_car_drive_rejects_invalid_distance(distance: float) -> None:
    c = Car("Toyota", "Corolla")
    c.start()
    with pytest.raises(ValueError):
        c.drive(distance)  # type: ignore[arg-type]


# Crossing the low-fuel threshold logs one warning; staying above it does not.
def test_car_warns_when_fuel_gets_low(caplog: pytest.LogCaptureFixture) -> None:
    c = Car("Toyota", "Corolla", fuel_level=LOW_FUEL_THRESHOLD + 5)
    c.start()

    with caplog.at_level(logging.WARNING, logger="vehiclekit.domain.vehicles"):
        c.drive(4)
        assert caplog.records == []
        assert c.is_fuel_low() is False

        c.drive(2)
        assert c.is_fuel_low() is True

    assert len(caplog.records) == 1
    assert "fuel is low" in caplog.records[0].getMessage()


# Boat starts unanchored and anchor() is one-way.
def test_boat_anchor_scenario() -> None:
    b = Boat("Yamaha", "242X")
    assert b.is_anchored() is False

    b.anchor()
    assert b.is_anchored() is True
    assert b.anchored is True
    assert b.is_started() is False
    assert not hasattr(b, "unanchor")


# Anchoring and starting do not interfere with each other.
def test_boat_start_and_anchor_are_independent() -> None:
    b = Boat("Yamaha", "242X")
    b.start()
    b.anchor()
    assert b.is_started() is True
    assert b.is_anchored() is True

    b.stop()
    assert b.is_anchored() is True


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (VehicleKind.BIKE, Bike),
        ("car", Car),
        (" BOAT ", Boat),
    ],
)
def test_create_vehicle_dispatches_on_kind(
    kind: VehicleKind | str, expected: type[Vehicle]
) -> None:
    v = create_vehicle(kind, "Make", "Model")
    assert type(v) is expected
    assert v.make == "Make"
    assert v.is_started() is False


def test_create_vehicle_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        create_vehicle("spaceship", "Make", "Model")


# Wheel counts stay fixed through anchoring, driving and refuelling too.
def test_boat_wheel_count_unchanged_by_anchor() -> None:
    b = Boat("Yamaha", "242X")
    b.anchor()
    assert b.wheel_count() == 0
    b.start()
    assert b.wheel_count() == 0


def test_car_wheel_count_unchanged_by_fuel_state() -> None:
    c = Car("Toyota", "Corolla")
    c.start()

    c.drive(90)
    assert c.wheel_count() == 4

    c.refuel()
    assert c.wheel_count() == 4
