from __future__ import annotations

from trunkflow.core.structured import as_str_dict, get_int, get_raw_str, get_str


def test_as_str_dict_rejects_non_string_keys() -> None:
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None
    assert as_str_dict({"a": 1}) == {"a": 1}


def test_get_str_strips_and_drops_empty() -> None:
    assert get_str({"k": "  v "}, "k") == "v"
    assert get_str({"k": "   "}, "k") is None
    assert get_str({"k": 3}, "k") is None


def test_get_raw_str_keeps_empty() -> None:
    assert get_raw_str({"k": ""}, "k") == ""
    assert get_raw_str({}, "k") is None


def test_get_int_rejects_bool() -> None:
    assert get_int({"k": 0}, "k") == 0
    assert get_int({"k": True}, "k") is None
    assert get_int({"k": "1"}, "k") is None
