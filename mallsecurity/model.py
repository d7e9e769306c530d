"""Domain objects for the mall security system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Point:
    """Coordinates of a location on the mall floor."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Route:
    """A path between two points that the robot follows."""

    start: Point | None = None
    end: Point | None = None


@dataclass
class Sensor:
    """A sensor mounted on the robot; ``state`` is True while it is active."""

    type: str = ""
    state: bool = False


@dataclass
class CameraSensor(Sensor):
    """A camera and the last photo it took."""

    photo: bytes = b""
    name: str = ""
    time: datetime | None = None


@dataclass
class SoundSensor(Sensor):
    """A microphone reporting sound intensity in decibels."""

    name: str = ""
    decibels: float = 0.0


@dataclass
class UltrasonicSensor(Sensor):
    """A proximity sensor reporting distance to nearby objects."""

    name: str = ""
    distance: float = 0.0


@dataclass
class UserAccount:
    """Credentials shared by every kind of user."""

    username: str = ""
    password: str = ""
    id: int = 0


@dataclass
class Administrator(UserAccount):
    """The administrator of the system."""


@dataclass(init=False)
class SecurityOperator(UserAccount):
    """An operator who controls the robot; the DNI doubles as username."""

    name: str = ""
    last_name: str = ""
    dni: str = ""
    authorized: bool = False
    help_needed: bool = True

    def __init__(
        self,
        name: str = "",
        last_name: str = "",
        dni: str = "",
        password: str = "",
        *,
        authorized: bool = False,
        help_needed: bool = True,
        id: int = 0,
    ) -> None:
        super().__init__(username=dni, password=password, id=id)
        self.name = name
        self.last_name = last_name
        self.dni = dni
        self.authorized = authorized
        self.help_needed = help_needed


@dataclass
class Question:
    """A frequently asked question and its answer."""

    text: str
    answer: str


@dataclass
class Warning:
    """An alarm: its description and when it started and ended."""

    type: str = ""
    starting_date: datetime | None = None
    ending_date: datetime | None = None


@dataclass
class WarningReport:
    """A history of the alarms raised in the mall."""

    history: list[Warning] = field(default_factory=list)

    def add(self, warning: Warning) -> None:
        """Append a warning to the history."""
        self.history.append(warning)


@dataclass
class MallMap:
    """A mall and its named zones."""

    id: int = 0
    mall_name: str = ""
    district: str = ""
    zones: dict[str, Point] = field(default_factory=dict)

    def add_zone(self, name: str, point: Point) -> None:
        """Add a zone, replacing any zone already under that name."""
        self.zones[name] = point

    def remove_zone(self, name: str) -> Point:
        """Remove a zone and return its point; KeyError if it is unknown."""
        try:
            return self.zones.pop(name)
        except KeyError:
            raise KeyError(f"unknown zone: {name!r}") from None