from osdsctl.cli_schema import (
    CLI_DICT_VIEWS,
    CLI_LIST_VIEWS,
    VOLUME_DICT_KEYS,
    VOLUME_LIST_KEYS,
    DictView,
    ListView,
)
from osdsctl.model import VolumeSpec


def test_dict_view_projects_keys_in_order():
    record = VolumeSpec(id="vol-1", size=10, metadata={"tier": "gold"})

    rows = CLI_DICT_VIEWS["volume.show"].rows(record)

    assert [key for key, _ in rows] == list(VOLUME_DICT_KEYS)
    assert dict(rows)["Size"] == "10"
    assert dict(rows)["Metadata"] == '{"tier": "gold"}'
    assert dict(rows)["Name"] == ""


def test_list_view_excludes_timestamps_and_metadata():
    assert "Metadata" not in VOLUME_LIST_KEYS
    assert "CreatedAt" not in VOLUME_LIST_KEYS

    rows = CLI_LIST_VIEWS["volume.list"].rows([VolumeSpec(id="vol-1", metadata={"a": "b"})])

    assert rows == [("vol-1", "", "", "0", "", "", "", "")]


def test_unknown_key_renders_empty_cell():
    view = DictView(keys=("PoolId", "SnapshotId"))

    rows = view.rows(VolumeSpec(pool_id="pool-a"))

    assert rows == [("PoolId", "pool-a"), ("SnapshotId", "")]


def test_formatter_hook_overrides_default_rendering():
    view = ListView(keys=("Id", "Size"), formatters={"Size": lambda value: f"{value} GB"})

    assert view.rows([VolumeSpec(id="vol-1", size=3)]) == [("vol-1", "3 GB")]


def test_empty_collection_renders_no_rows():
    assert CLI_LIST_VIEWS["volume.list"].rows([]) == []
