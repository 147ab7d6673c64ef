"""IceTray - EPICS database and protocol generator for IceCube devices."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("icetray")
except PackageNotFoundError:
    __version__ = "(local)"
