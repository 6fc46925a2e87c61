"""
Data structures shared by the solar calculator, the controller and its collaborators.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Union

from sun_control import constants


class TimeReference(Enum):
    """How a timezone-naive instant is interpreted."""
    UTC = "utc"
    LOCAL = "local"


class Direction(Enum):
    """
    Scene axis the sun rises along.

    Each member carries the heading, in degrees, that aligns astronomical
    azimuth with that axis.
    """
    POSITIVE_X = "positive_x"
    POSITIVE_Z = "positive_z"
    NEGATIVE_X = "negative_x"
    NEGATIVE_Z = "negative_z"

    @property
    def degrees(self) -> float:
        return _DIRECTION_DEGREES[self]


_DIRECTION_DEGREES = {
    Direction.POSITIVE_X: 0.0,
    Direction.POSITIVE_Z: -90.0,
    Direction.NEGATIVE_X: 180.0,
    Direction.NEGATIVE_Z: 90.0,
}


@dataclass(frozen=True)
class SkyPosition:
    """
    Where the sun appears in the sky.

    Attributes:
        azimuth: Horizontal angle in degrees, 0 = south, positive toward west
        altitude: Angle above the horizon in degrees
    """
    azimuth: float
    altitude: float

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude > 0.0


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer location in degrees."""
    latitude: float = constants.DEFAULT_LATITUDE
    longitude: float = constants.DEFAULT_LONGITUDE

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be within [-180, 180], got {self.longitude}")


@dataclass(frozen=True)
class StartingDate:
    day: int = constants.DEFAULT_DAY
    month: int = constants.DEFAULT_MONTH
    year: int = constants.DEFAULT_YEAR


@dataclass(frozen=True)
class StartingTime:
    hour: int = constants.DEFAULT_HOUR
    minute: int = constants.DEFAULT_MINUTE

    def __post_init__(self):
        if not 0 <= self.hour < 24:
            raise ValueError(f"hour must be within [0, 23], got {self.hour}")
        if not 0 <= self.minute < 60:
            raise ValueError(f"minute must be within [0, 59], got {self.minute}")


@dataclass(frozen=True)
class LiveReference:
    """
    Rotation offset read from a reference object's current heading.

    Attributes:
        heading: Zero-argument callable returning the heading in degrees.
                 Called on every sun update, never cached.
    """
    heading: Callable[[], float]

    def resolve(self) -> float:
        return float(self.heading())


@dataclass(frozen=True)
class FixedCardinal:
    """
    Rotation offset from a cardinal sunrise direction plus a fine-tune angle.

    Attributes:
        direction: Scene axis the sun rises along
        fine_tune: Additional offset in degrees, within [0, 360)
    """
    direction: Direction = Direction.POSITIVE_X
    fine_tune: float = 0.0

    def __post_init__(self):
        if not 0.0 <= self.fine_tune < 360.0:
            raise ValueError(f"fine_tune must be within [0, 360), got {self.fine_tune}")

    def resolve(self) -> float:
        return self.direction.degrees + self.fine_tune


RotationOffset = Union[LiveReference, FixedCardinal]


@dataclass(frozen=True)
class SunState:
    """
    Snapshot published after every time change.

    Attributes:
        instant: The simulated date/time the position was computed for
        position: Astronomical azimuth/altitude
        rotation_offset: Scene heading offset added to the azimuth (degrees)
    """
    instant: datetime
    position: SkyPosition
    rotation_offset: float = field(default=0.0)

    @property
    def heading(self) -> float:
        """Azimuth rotated into the scene's frame."""
        return self.position.azimuth + self.rotation_offset

    @property
    def euler(self):
        """(x, y, z) Euler angles: altitude about X, heading about Y."""
        return (self.position.altitude, self.heading, 0.0)
