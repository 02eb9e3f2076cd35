from enum import Enum


class VehicleKind(Enum):
    """Enumeration for the vehicle variants."""

    BIKE = "bike"
    CAR = "car"
    BOAT = "boat"
