"""Errors raised while building an IceCube."""


class IceCubeError(RuntimeError):
    """Base class for all IceCube construction failures."""


class InvalidNameError(IceCubeError):
    """Raised when a device or signal name is not a legal identifier."""


class MissingFieldError(IceCubeError):
    """Raised when a required field is absent from a descriptor."""


class DuplicateSignalError(IceCubeError):
    """Raised when two structurally equal signals share a device."""


class UnrecognizedDirectionError(IceCubeError):
    """Raised when a signal direction is neither "R" nor "W"."""


class TagExhaustionError(IceCubeError):
    """Raised when a device has more signals than protocol tags."""


class InvalidScanRateError(IceCubeError):
    """Raised when a read signal's scan rate cannot be written into a record."""
