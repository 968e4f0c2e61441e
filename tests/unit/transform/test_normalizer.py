"""Unit tests for the list-field normalizer."""

from __future__ import annotations

import copy

from steam_helpers.transform import CLASSINFO_ARRAYISH_FIELDS, normalize, normalize_classinfo


def _classinfo():
    return {
        "classid": "101785959",
        "name": "Mann Co. Supply Crate Key",
        "actions": {"0": {"name": "Inspect", "link": "steam://inspect"}},
        "tags": {
            "0": {"internal_name": "Unique", "category": "Quality"},
            "2": {"internal_name": "Tool", "category": "Type"},
        },
        "descriptions": [{"type": "html", "value": "Used to open crates."}],
        "market_actions": "",
    }


def test_map_fields_become_lists_of_values():
    result = normalize_classinfo(_classinfo())

    assert result["actions"] == [{"name": "Inspect", "link": "steam://inspect"}]
    assert [t["internal_name"] for t in result["tags"]] == ["Unique", "Tool"]


def test_list_and_scalar_fields_untouched():
    result = normalize_classinfo(_classinfo())

    assert result["descriptions"] == [{"type": "html", "value": "Used to open crates."}]
    assert result["market_actions"] == ""
    assert result["name"] == "Mann Co. Supply Crate Key"


def test_absent_fields_stay_absent():
    result = normalize({"classid": "1"}, CLASSINFO_ARRAYISH_FIELDS)
    assert result == {"classid": "1"}


def test_input_not_mutated():
    record = _classinfo()
    snapshot = copy.deepcopy(record)

    result = normalize_classinfo(record)

    assert record == snapshot
    assert result is not record


def test_idempotent():
    once = normalize_classinfo(_classinfo())
    twice = normalize_classinfo(once)
    assert twice == once


def test_only_listed_fields_are_normalized():
    record = {"tags": {"0": "a"}, "app_data": {"0": "b"}}
    assert normalize(record, ["tags"]) == {"tags": ["a"], "app_data": {"0": "b"}}
