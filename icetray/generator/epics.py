"""EPICS database and StreamDevice protocol generator for IceCube signals."""

from __future__ import annotations

import logging
import string
from collections.abc import Sequence
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader

from .errors import TagExhaustionError

if TYPE_CHECKING:
    from .types import Signal

logger = logging.getLogger(__name__)

env = Environment(
    loader=PackageLoader("icetray.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

# Every protocol function is addressed on the wire by one of these characters
TAG_ALPHABET = string.ascii_uppercase + string.ascii_lowercase

PROTO_HEADER = "Terminator = LF;\n"

DEFAULT_TARGET_FILE = "arduino.db"


def allocate_tags(count: int) -> str:
    """Return the first count protocol tags, in allocation order."""
    if count > len(TAG_ALPHABET):
        raise TagExhaustionError(
            f"{count} signals exceed the {len(TAG_ALPHABET)} available protocol tags"
        )
    return TAG_ALPHABET[:count]


def render_record(signal: Signal, target_file: str) -> str:
    """Render one EPICS record block for a signal."""
    template = env.get_template(f"{signal.record_type}.db.j2")
    return template.render(signal=signal, target_file=target_file)


def render_function(signal: Signal, tag: str) -> str:
    """Render one StreamDevice protocol function for a signal."""
    if len(tag) != 1:
        raise ValueError(f"Protocol tag must be a single character, got {tag!r}")
    template = env.get_template(f"{signal.function_prefix}.proto.j2")
    return template.render(signal=signal, tag=tag)


def render_db(signals: Sequence[Signal], target_file: str = DEFAULT_TARGET_FILE) -> str:
    """Render the EPICS database: one record per signal, in order."""
    logger.debug("Rendering %d records for %s", len(signals), target_file)
    return "".join(signal.emit_record(target_file) for signal in signals)


def render_proto(signals: Sequence[Signal]) -> str:
    """Render the protocol file.

    Tags are handed out in declaration order across all signals, so the
    n-th signal always answers to TAG_ALPHABET[n] whatever its direction.
    """
    tags = allocate_tags(len(signals))
    logger.debug("Rendering %d protocol functions with tags %r", len(signals), tags)

    fragments = [PROTO_HEADER]
    fragments.extend(
        signal.emit_proto_function(tag) for signal, tag in zip(signals, tags, strict=True)
    )
    return "".join(fragments)


def tag_table(signals: Sequence[Signal]) -> list[tuple[Signal, str]]:
    """Pair each signal with its protocol tag."""
    return list(zip(signals, allocate_tags(len(signals)), strict=True))
