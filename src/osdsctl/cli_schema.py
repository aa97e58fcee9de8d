"""Key projections used when rendering records in the CLI."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .model import VolumeSpec

ValueFormatter = Callable[[Any], str]
KeyList = tuple[str, ...]
FormatterList = Mapping[str, ValueFormatter]


def default_formatter(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return json.dumps(dict(value), sort_keys=True) if value else ""
    return str(value)


def render_value(record: VolumeSpec, key: str, formatters: FormatterList) -> str:
    value = record.get(key)
    formatter = formatters.get(key)
    if formatter is None:
        return default_formatter(value)
    formatted = formatter(value)
    return "" if formatted is None else str(formatted)


@dataclass(frozen=True)
class DictView:
    """Property/value rows for a single record."""

    keys: KeyList
    formatters: FormatterList = field(default_factory=dict)

    def rows(self, record: VolumeSpec) -> list[tuple[str, str]]:
        return [(key, render_value(record, key, self.formatters)) for key in self.keys]


@dataclass(frozen=True)
class ListView:
    """One table row per record, one column per key."""

    keys: KeyList
    formatters: FormatterList = field(default_factory=dict)

    def rows(self, records: Sequence[VolumeSpec]) -> list[tuple[str, ...]]:
        return [
            tuple(render_value(record, key, self.formatters) for key in self.keys)
            for record in records
        ]


VOLUME_DICT_KEYS: KeyList = (
    "Id",
    "CreatedAt",
    "UpdatedAt",
    "Name",
    "Description",
    "Size",
    "AvailabilityZone",
    "Status",
    "PoolId",
    "ProfileId",
    "Metadata",
)

VOLUME_LIST_KEYS: KeyList = (
    "Id",
    "Name",
    "Description",
    "Size",
    "AvailabilityZone",
    "Status",
    "PoolId",
    "ProfileId",
)

CLI_DICT_VIEWS: dict[str, DictView] = {
    "volume.create": DictView(keys=VOLUME_DICT_KEYS),
    "volume.show": DictView(keys=VOLUME_DICT_KEYS),
    "volume.update": DictView(keys=VOLUME_DICT_KEYS),
}

CLI_LIST_VIEWS: dict[str, ListView] = {
    "volume.list": ListView(keys=VOLUME_LIST_KEYS),
}
