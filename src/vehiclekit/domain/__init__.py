from .enums import VehicleKind
from .vehicles import Bike, Boat, Car, Vehicle, create_vehicle

__all__ = [
    "VehicleKind",
    "Vehicle",
    "Bike",
    "Car",
    "Boat",
    "create_vehicle",
]
