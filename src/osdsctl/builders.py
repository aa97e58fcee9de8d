"""Turn parsed command-line input into volume requests.

Every function here is pure: nothing touches the network, so argument and
size validation always happen before a client is built.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import ArgumentCountError, SizeParseError
from .model import VolumeSpec

# ASCII digits with an optional sign; no whitespace, underscores or other numerals.
_SIZE_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class VolumeOptions:
    """Flags collected for a single `volume` subcommand invocation."""

    profile: str = ""
    name: str = ""
    description: str = ""
    availability_zone: str = ""


def require_args(args: Sequence[str] | None, expected: int) -> list[str]:
    received = list(args or [])
    if len(received) != expected:
        raise ArgumentCountError(expected=expected, received=len(received))
    return received


def parse_size(raw: str) -> int:
    if not _SIZE_PATTERN.fullmatch(raw):
        raise SizeParseError(raw, "invalid syntax")
    size = int(raw)
    if size < 0:
        raise SizeParseError(raw, "size must not be negative")
    return size


def build_create_request(raw_size: str, options: VolumeOptions) -> VolumeSpec:
    return VolumeSpec(
        name=options.name,
        description=options.description,
        availability_zone=options.availability_zone,
        size=parse_size(raw_size),
        profile_id=options.profile,
    )


def build_delete_request(options: VolumeOptions) -> VolumeSpec:
    return VolumeSpec(profile_id=options.profile)


def build_update_request(options: VolumeOptions) -> VolumeSpec:
    return VolumeSpec(name=options.name, description=options.description)
