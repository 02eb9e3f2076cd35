import logging
from abc import ABC

from vehiclekit.domain.enums import VehicleKind

logger = logging.getLogger(__name__)

FULL_TANK = 100
LOW_FUEL_THRESHOLD = 20
FUEL_PER_KM = 1


class Vehicle(ABC):
    """Abstract base class for every vehicle.

    A vehicle only knows whether it is started. Variants add their own
    capabilities on top of that lifecycle without changing it.
    """

    # Protected attributes
    _make: str
    _model: str
    _started: bool

    kind: VehicleKind

    def __init__(self, make: str, model: str) -> None:
        """
        Initialize a Vehicle instance.

        Args:
            make: Manufacturer name
            model: Model name
        """
        self._make = make
        self._model = model
        self._started = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._make!r}, {self._model!r})"

    # ----------------------------
    # Lifecycle
    # ----------------------------
    def start(self) -> None:
        """Start the vehicle. Starting a started vehicle changes nothing."""
        self._started = True

    def stop(self) -> None:
        """Stop the vehicle. Stopping a stopped vehicle changes nothing."""
        self._started = False

    def is_started(self) -> bool:
        return self._started

    def wheel_count(self) -> int:
        """
        Return the fixed number of wheels of this vehicle type.

        Raises:
            NotImplementedError: if the subclass does not define it
        """
        raise NotImplementedError("Subclasses must define wheel_count()")

    # ----------------------------
    # Read-only properties
    # ----------------------------
    @property
    def make(self) -> str:
        return self._make

    @property
    def model(self) -> str:
        return self._model

    @property
    def started(self) -> bool:
        return self._started


class Bike(Vehicle):
    """Bike subclass representing a bicycle. It has no fuel tank."""

    kind = VehicleKind.BIKE

    def wheel_count(self) -> int:
        return 2


class Car(Vehicle):
    """Car subclass representing a fuelled car."""

    kind = VehicleKind.CAR

    _fuel_level: int

    def __init__(self, make: str, model: str, fuel_level: int = FULL_TANK) -> None:
        """
        Initialize a Car instance.

        Args:
            make: Manufacturer name
            model: Model name
            fuel_level: Fuel level percentage (0-100, default: 100)
        """
        super().__init__(make, model)
        if (
            isinstance(fuel_level, bool)
            or not isinstance(fuel_level, int)
            or not 0 <= fuel_level <= FULL_TANK
        ):
            raise ValueError("Fuel level must be an integer between 0 and 100")
        self._fuel_level = fuel_level

    def wheel_count(self) -> int:
        return 4

    @property
    def fuel_level(self) -> int:
        return self._fuel_level

    def refuel(self) -> None:
        """Top the tank up to full, whatever the current level."""
        self._fuel_level = FULL_TANK

    def is_fuel_low(self) -> bool:
        return self._fuel_level < LOW_FUEL_THRESHOLD

    def drive(self, distance: int) -> int:
        """
        Drive the car and burn fuel for each whole kilometre covered.

        The trip ends early when the tank runs dry.

        Args:
            distance: Requested distance in kilometres

        Returns:
            int: The distance actually covered

        Raises:
            ValueError: if the car is not started or distance is negative
        """
        if not self._started:
            raise ValueError("Car must be started before driving")
        if isinstance(distance, bool) or not isinstance(distance, int) or distance < 0:
            raise ValueError("distance must be a non-negative integer")

        was_low = self.is_fuel_low()
        covered = min(distance, self._fuel_level // FUEL_PER_KM)
        self._fuel_level -= covered * FUEL_PER_KM

        if covered < distance:
            logger.warning(
                "%r ran out of fuel after %d of %d km", self, covered, distance
            )
        elif self.is_fuel_low() and not was_low:
            logger.warning("%r fuel is low (%d%%)", self, self._fuel_level)
        return covered


class Boat(Vehicle):
    """Boat subclass. Anchoring is independent of the engine state."""

    kind = VehicleKind.BOAT

    _anchored: bool

    def __init__(self, make: str, model: str) -> None:
        super().__init__(make, model)
        self._anchored = False

    def wheel_count(self) -> int:
        return 0

    def anchor(self) -> None:
        """Drop the anchor. There is no way to raise it again."""
        self._anchored = True

    def is_anchored(self) -> bool:
        return self._anchored

    @property
    def anchored(self) -> bool:
        return self._anchored


VEHICLE_TYPES: dict[VehicleKind, type[Vehicle]] = {
    VehicleKind.BIKE: Bike,
    VehicleKind.CAR: Car,
    VehicleKind.BOAT: Boat,
}


def create_vehicle(kind: VehicleKind | str, make: str, model: str) -> Vehicle:
    """
    Build a vehicle of the given kind.

    Args:
        kind: A VehicleKind or its value (bike | car | boat)
        make: Manufacturer name
        model: Model name

    Returns:
        Vehicle: A fresh, stopped instance of the requested variant
    """
    if isinstance(kind, str):
        normalized = kind.strip().lower()
        valid = {k.value for k in VehicleKind}
        if normalized not in valid:
            raise ValueError(f"Invalid vehicle kind: {kind}. Must be one of {valid}")
        kind = VehicleKind(normalized)
    return VEHICLE_TYPES[kind](make, model)
