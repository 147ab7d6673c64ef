"""Signal and document types for IceCube definitions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Self

from dataclasses_json import DataClassJsonMixin, config

from . import epics
from .errors import IceCubeError, MissingFieldError, UnrecognizedDirectionError
from .validate import check_name, check_scan_rate

__all__ = [
    "DEFAULT_SCAN_RATE",
    "CubeDocument",
    "Direction",
    "Signal",
    "SignalDocument",
]

DEFAULT_SCAN_RATE = ".1 second"


class Direction(StrEnum):
    """Direction of a signal as seen from the IOC."""

    READ = "R"
    WRITE = "W"


# EPICS record type for each direction
RECORD_TYPES = {
    Direction.READ: "ai",
    Direction.WRITE: "ao",
}

# PV name extension; reads keep the bare name for their record
PV_EXTENSIONS = {
    Direction.READ: ":get",
    Direction.WRITE: ":set",
}

# Prefix of the StreamDevice protocol function
FUNCTION_PREFIXES = {
    Direction.READ: "get",
    Direction.WRITE: "set",
}


@dataclass
class SignalDocument(DataClassJsonMixin):
    """Canonical JSON form of a signal.

    scanRate is only present for read signals.
    """

    name: str
    direction: str = field(metadata=config(field_name="RW"))
    scan_rate: str | None = field(
        default=None,
        metadata=config(field_name="scanRate", exclude=lambda value: value is None),
    )


@dataclass
class CubeDocument(DataClassJsonMixin):
    """Canonical JSON form of an IceCube."""

    name: str
    signals: list[SignalDocument]


def require(descriptor: Mapping[str, Any], key: str, owner: str) -> Any:
    """Fetch a required key from a descriptor, or raise MissingFieldError."""
    if not isinstance(descriptor, Mapping):
        raise MissingFieldError(f"{owner} must be an object, got {type(descriptor).__name__}")
    if key not in descriptor or descriptor[key] is None:
        raise MissingFieldError(f"{owner} is missing required field {key!r}")
    return descriptor[key]


@dataclass(frozen=True)
class Signal:
    """A single named I/O point of an IceCube.

    The direction tag decides everything else: read signals become "ai"
    records polled at scan_rate, write signals become "ao" records named
    <name>:set. Two signals are duplicates exactly when they compare equal.
    """

    name: str
    direction: Direction
    scan_rate: str | None = None

    def __post_init__(self) -> None:
        try:
            direction = Direction(self.direction)
        except ValueError:
            raise UnrecognizedDirectionError(
                f"Signal {self.name!r} has unrecognized direction {self.direction!r}"
            ) from None
        object.__setattr__(self, "direction", direction)

        check_name(self.name)

        if direction is Direction.READ:
            if self.scan_rate is None or self.scan_rate == "":
                raise MissingFieldError(f"Read signal {self.name} requires a scan rate")
            check_scan_rate(self.scan_rate, f"read signal {self.name}")
        elif self.scan_rate is not None:
            raise IceCubeError(f"Write signal {self.name} cannot have a scan rate")

    @classmethod
    def read(cls, name: str, scan_rate: str = DEFAULT_SCAN_RATE) -> Self:
        return cls(name, Direction.READ, scan_rate)

    @classmethod
    def write(cls, name: str) -> Self:
        return cls(name, Direction.WRITE)

    @classmethod
    def from_descriptor(cls, descriptor: Mapping[str, Any]) -> Self:
        """Build a signal from one entry of an input document.

        A scanRate given for a write signal is ignored.
        """
        name = require(descriptor, "name", "Signal")
        direction = require(descriptor, "RW", f"Signal {name!r}")

        if direction == Direction.READ:
            return cls.read(name, require(descriptor, "scanRate", f"Read signal {name!r}"))
        if direction == Direction.WRITE:
            return cls.write(name)
        raise UnrecognizedDirectionError(
            f"Signal {name!r} has unrecognized direction {direction!r}, expected 'R' or 'W'"
        )

    @property
    def is_read(self) -> bool:
        return self.direction is Direction.READ

    @property
    def is_write(self) -> bool:
        return self.direction is Direction.WRITE

    @property
    def record_type(self) -> str:
        return RECORD_TYPES[self.direction]

    @property
    def pv_ext(self) -> str:
        return PV_EXTENSIONS[self.direction]

    @property
    def pv_name(self) -> str:
        """Name of the EPICS record for this signal."""
        if self.is_write:
            return self.name + self.pv_ext
        return self.name

    @property
    def function_prefix(self) -> str:
        return FUNCTION_PREFIXES[self.direction]

    @property
    def function_name(self) -> str:
        """Name of the protocol function serving this signal."""
        return f"{self.function_prefix}_{self.name}"

    def emit_record(self, target_file: str) -> str:
        """Render this signal's EPICS database record."""
        return epics.render_record(self, target_file)

    def emit_proto_function(self, tag: str) -> str:
        """Render this signal's protocol function keyed by tag."""
        return epics.render_function(self, tag)

    def descriptor(self) -> SignalDocument:
        return SignalDocument(
            name=self.name,
            direction=self.direction.value,
            scan_rate=self.scan_rate if self.is_read else None,
        )
