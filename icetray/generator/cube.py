"""The IceCube device: a named, ordered set of signals and its EPICS files.

Each physical IceCube is an IOC on a small computer paired with a single
microcontroller. An IceCube is described by a document such as::

    {
        "name": "RPi1",
        "signals": [
            {"name": "photoresistor1", "RW": "R", "scanRate": "1 second"},
            {"name": "led1", "RW": "W"}
        ]
    }

From it the IceCube derives the EPICS database definition and the
StreamDevice protocol file. Everything is computed once on construction.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from . import epics
from .types import CubeDocument, Signal, require
from .validate import check_name, check_signals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IceCube:
    """A validated, immutable IceCube definition."""

    name: str
    signals: tuple[Signal, ...]
    target_file: str = epics.DEFAULT_TARGET_FILE

    read_signals: tuple[Signal, ...] = field(init=False, repr=False)
    write_signals: tuple[Signal, ...] = field(init=False, repr=False)
    document: CubeDocument = field(init=False, repr=False, compare=False)
    db_text: str = field(init=False, repr=False, compare=False)
    proto_text: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_name(self.name, "IceCube")
        signals = tuple(self.signals)
        check_signals(signals)

        # Local values first so a failure never leaves a half-built object
        read_signals = tuple(sig for sig in signals if sig.is_read)
        write_signals = tuple(sig for sig in signals if sig.is_write)
        document = CubeDocument(name=self.name, signals=[sig.descriptor() for sig in signals])
        db_text = epics.render_db(signals, self.target_file)
        proto_text = epics.render_proto(signals)

        object.__setattr__(self, "signals", signals)
        object.__setattr__(self, "read_signals", read_signals)
        object.__setattr__(self, "write_signals", write_signals)
        object.__setattr__(self, "document", document)
        object.__setattr__(self, "db_text", db_text)
        object.__setattr__(self, "proto_text", proto_text)

        logger.debug(
            "Built IceCube %s with %d read and %d write signals",
            self.name,
            len(read_signals),
            len(write_signals),
        )

    @classmethod
    def from_document(
        cls, document: Mapping[str, Any], target_file: str = epics.DEFAULT_TARGET_FILE
    ) -> Self:
        """Build an IceCube from a parsed input document."""
        name = require(document, "name", "IceCube")
        descriptors = require(document, "signals", f"IceCube {name!r}")
        return cls(
            name,
            tuple(Signal.from_descriptor(descriptor) for descriptor in descriptors),
            target_file=target_file,
        )

    @classmethod
    def from_json(cls, text: str, target_file: str = epics.DEFAULT_TARGET_FILE) -> Self:
        """Build an IceCube from JSON text."""
        return cls.from_document(json.loads(text), target_file=target_file)

    @classmethod
    def build(
        cls,
        name: str,
        signals: Iterable[Signal],
        target_file: str = epics.DEFAULT_TARGET_FILE,
    ) -> Self:
        return cls(name, tuple(signals), target_file=target_file)

    def generate_db(self, target_file: str | None = None) -> str:
        """Return the EPICS database text.

        Without a target_file this is the cached db_text.
        """
        if target_file is None or target_file == self.target_file:
            return self.db_text
        return epics.render_db(self.signals, target_file)

    def generate_proto(self) -> str:
        return self.proto_text

    def tags(self) -> list[tuple[Signal, str]]:
        """Pair each signal with the protocol tag it answers to."""
        return epics.tag_table(self.signals)

    def count_read(self) -> int:
        return len(self.read_signals)

    def count_write(self) -> int:
        return len(self.write_signals)

    def count_all(self) -> int:
        return self.count_read() + self.count_write()

    def to_json(self, **kwargs: Any) -> str:
        """Serialise the canonical document."""
        return self.document.to_json(**kwargs)
