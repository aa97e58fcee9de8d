import pytest

from osdsctl.builders import (
    VolumeOptions,
    build_create_request,
    build_delete_request,
    build_update_request,
    parse_size,
    require_args,
)
from osdsctl.exceptions import ArgumentCountError, SizeParseError
from osdsctl.model import VolumeSpec

OPTIONS = VolumeOptions(profile="p1", name="foo", description="bar", availability_zone="az1")


def test_create_request_carries_all_create_flags():
    spec = build_create_request("100", OPTIONS)

    assert spec == VolumeSpec(
        size=100,
        name="foo",
        description="bar",
        availability_zone="az1",
        profile_id="p1",
    )


def test_delete_request_only_carries_profile():
    assert build_delete_request(OPTIONS) == VolumeSpec(profile_id="p1")


def test_update_request_only_carries_name_and_description():
    assert build_update_request(OPTIONS) == VolumeSpec(name="foo", description="bar")


@pytest.mark.parametrize(
    "raw",
    ["abc", "1.5", "", "-5", "1_000", " 7 ", "7\n", "\u0663", "0x10"],
)
def test_parse_size_rejects_invalid_values(raw):
    with pytest.raises(SizeParseError) as excinfo:
        parse_size(raw)

    assert str(excinfo.value).startswith(f"error parsing size {raw}:")


def test_parse_size_accepts_zero():
    assert parse_size("0") == 0


@pytest.mark.parametrize(("args", "expected"), [(None, 1), (["a", "b"], 1), (["a"], 0)])
def test_require_args_rejects_wrong_counts(args, expected):
    with pytest.raises(ArgumentCountError) as excinfo:
        require_args(args, expected)

    assert str(excinfo.value) == "The number of args is not correct!"


def test_require_args_returns_list():
    assert require_args(("vol-1",), 1) == ["vol-1"]
    assert require_args(None, 0) == []


def test_parse_size_accepts_explicit_plus_sign():
    assert parse_size("+7") == 7
