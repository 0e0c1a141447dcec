from __future__ import annotations

from npmrel.core.structured import as_str_dict, get_str, get_table, str_list


def test_str_list_normalises_single_value() -> None:
    assert str_list("0.72.0") == ["0.72.0"]
    assert str_list(["0.72.0", "0.72.1"]) == ["0.72.0", "0.72.1"]
    assert str_list([]) == []


def test_str_list_rejects_other_shapes() -> None:
    assert str_list(["0.72.0", 3, None]) is None
    assert str_list({"version": "0.72.0"}) is None
    assert str_list(72) is None
    assert str_list(None) is None


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None


def test_get_helpers() -> None:
    table: dict[str, object] = {"name": "  pkg ", "blank": " ", "error": {"summary": "x"}}
    assert get_str(table, "name") == "pkg"
    assert get_str(table, "blank") is None
    assert get_str(table, "missing") is None
    assert get_table(table, "error") == {"summary": "x"}
    assert get_table(table, "name") is None
