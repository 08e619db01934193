import json

import pytest
from pydantic import ValidationError

from standardcheck.catalog import CharlistMode, StandardRule, default_catalog, load_catalog, parse_catalog, resolve_list
from standardcheck.errors import CatalogError, UnknownStandardError


def test_embedded_catalog_loads_all_standards():
    catalog = default_catalog()
    assert len(catalog) == 75
    assert catalog.names()[0] == "POSIX"
    assert catalog.names()[-1] == "XOPEN"


def test_embedded_catalog_names_are_unique_case_insensitively():
    names = [name.casefold() for name in default_catalog().names()]
    assert len(names) == len(set(names))


def test_lookup_is_case_insensitive_for_every_standard():
    catalog = default_catalog()
    for rule in catalog:
        assert catalog.lookup(rule.name) is rule
        assert catalog.lookup(rule.name.upper()) is rule
        assert catalog.lookup(rule.name.lower()) is rule


@pytest.mark.parametrize("name", ["NOPE", "posix ", "FAT64", "", "SYSTEM"])
def test_lookup_unknown_name_raises(name):
    with pytest.raises(UnknownStandardError) as excinfo:
        default_catalog().lookup(name)
    assert excinfo.value.name == name


def test_testing_standard_values():
    rule = default_catalog().lookup("testing")
    assert rule.charlist == "/abcdefgh"
    assert rule.charlist_mode is CharlistMode.BLACKLIST
    assert rule.size_limit == 1
    assert rule.max_entries == 1
    assert rule.max_component_length == 1
    assert rule.max_path_length == 1
    assert not rule.duplicates_allowed
    assert not rule.symlinks_allowed
    assert not rule.hardlinks_allowed


def test_unset_limits_and_flags_use_defaults():
    rule = default_catalog().lookup("XOPEN")
    assert rule.charlist is None
    assert rule.size_limit is None
    assert rule.max_entries is None
    assert rule.max_component_length == 255
    assert rule.max_path_length == 1023
    assert rule.duplicates_allowed and rule.symlinks_allowed and rule.hardlinks_allowed


def test_resolve_list_preserves_order_and_duplicates():
    rules = resolve_list("posix,FAT32,Posix")
    assert [rule.name for rule in rules] == ["POSIX", "FAT32", "POSIX"]


@pytest.mark.parametrize("names", ["", ",", "POSIX,", ",POSIX", "POSIX,,ext4"])
def test_resolve_list_rejects_empty_tokens(names):
    with pytest.raises(UnknownStandardError) as excinfo:
        resolve_list(names)
    assert excinfo.value.name == ""


def test_resolve_list_reports_first_unknown_name():
    with pytest.raises(UnknownStandardError) as excinfo:
        resolve_list("POSIX,bogus,alsobogus")
    assert excinfo.value.name == "bogus"
    assert str(excinfo.value) == "Invalid standard: bogus"


def test_parse_catalog_rejects_duplicate_names():
    text = json.dumps({"standards": [{"name": "Alpha"}, {"name": "ALPHA"}]})
    with pytest.raises(CatalogError):
        parse_catalog(text)


@pytest.mark.parametrize(
    "entry",
    [
        {"name": ""},
        {"name": "Zero", "max_path_length": 0},
        {"name": "Empty", "charlist": ""},
        {"name": "Mode", "charlist_mode": "greylist"},
        {"name": "Extra", "unknown_field": 1},
    ],
)
def test_parse_catalog_rejects_invalid_entries(entry):
    with pytest.raises(CatalogError):
        parse_catalog(json.dumps({"standards": [entry]}))


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(
        json.dumps(
            {
                "standards": [
                    {"name": "Tiny", "max_path_length": 8, "charlist": "abc/", "charlist_mode": "whitelist"},
                    {"name": "NoLinks", "symlinks_allowed": False},
                ]
            }
        ),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.names() == ["Tiny", "NoLinks"]
    tiny = catalog.lookup("tiny")
    assert tiny.charlist_mode is CharlistMode.WHITELIST
    assert tiny.max_path_length == 8
    assert catalog.lookup("nolinks").symlinks_allowed is False
    assert "POSIX" not in catalog


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "missing.json")


def test_standard_rule_is_immutable():
    rule = StandardRule(name="Frozen", max_path_length=4)
    with pytest.raises(ValidationError):
        rule.max_path_length = 5
