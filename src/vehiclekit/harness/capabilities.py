"""Capability surfaces that shared bundles are written against.

A bundle only touches the methods listed here, so anything that offers them
can be used as a subject, whatever its class.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Startable(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...

    def is_started(self) -> bool: ...


@runtime_checkable
class Wheeled(Protocol):
    def wheel_count(self) -> int: ...


@runtime_checkable
class Fuelled(Protocol):
    @property
    def fuel_level(self) -> int: ...

    def refuel(self) -> None: ...


@runtime_checkable
class Anchorable(Protocol):
    def anchor(self) -> None: ...

    def is_anchored(self) -> bool: ...
