"""Structural parsing of block mappings and sequences."""
from __future__ import annotations

import pytest

from liteyaml.yamlparser import StructuralError, YamlDocument, parse


def test_quoted_value_in_mapping() -> None:
    assert parse('key: "value"') == {"key": "value"}


def test_sequence_of_integers() -> None:
    assert parse("- 1\n- 2\n- 3\n") == [1, 2, 3]


def test_nested_mapping() -> None:
    assert parse("a:\n  b: 1\n  c: 2\n") == {"a": {"b": 1, "c": 2}}


def test_mapping_preserves_insertion_order() -> None:
    result = parse("k3: v3\nk1: v1\nk2: v2\n")
    assert list(result) == ["k3", "k1", "k2"]


def test_duplicate_key_last_wins() -> None:
    assert parse("a: 1\nb: 2\na: 3\n") == {"a": 3, "b": 2}


def test_records_with_nested_sequences() -> None:
    doc = YamlDocument(
        """\
key: "value"        # quoted string
seq:
  - id: 1           # integer
    name: one       # string
    lock: true      # boolean
  - id: 2
    name:           # no value means null
"""
    )
    assert doc.get("key") == "value"
    assert doc.get("seq", 1, "id") == 2
    assert doc.get("seq", 0) == {"id": 1, "name": "one", "lock": True}
    assert doc.get("seq", 1, "name") is None
    assert doc.get("seq", 1, "lock") is None


def test_artists_document() -> None:
    doc = YamlDocument(
        """\
%YAML 1.x
---
artists:
  - name: Beatles
    albums:
      - name: Help
        year: 1965
        top1: true
      - name: Abbey Road
        year: 1969
        top1: true
  - name: Morcheeba
    albums:
      - name: Charango
        year: 2002
        top1: false
...
"""
    )
    assert doc.get("artists", 0, "albums", 0, "year") == 1965
    assert [artist["name"] for artist in doc.get("artists")] == ["Beatles", "Morcheeba"]
    top = [
        album["name"]
        for artist in doc.get("artists")
        for album in artist["albums"]
        if album["top1"]
    ]
    assert top == ["Help", "Abbey Road"]


def test_list_of_lists() -> None:
    assert parse("-\n  - a\n  - b\n") == [["a", "b"]]
    assert parse("- - a\n  - b\n") == [["a", "b"]]


def test_map_of_lists() -> None:
    assert parse("k1:\n  - v1\n  - v2\nk2:\n  - v3\n  - v4\n") == {
        "k1": ["v1", "v2"],
        "k2": ["v3", "v4"],
    }


def test_list_of_maps() -> None:
    assert parse("- k1: v1\n  k2: v2\n- k1: v3\n  k2: v4\n") == [
        {"k1": "v1", "k2": "v2"},
        {"k1": "v3", "k2": "v4"},
    ]


@pytest.mark.parametrize(
    "text",
    [
        "-\n  - k1: v1\n    k2: v2\n  - k1: v3\n    k2: v4\n",
        "-\n  -\n    k1: v1\n    k2: v2\n  -\n    k1: v3\n    k2: v4\n",
        "- - k1: v1\n    k2: v2\n  - k1: v3\n    k2: v4\n",
    ],
)
def test_list_of_lists_of_maps(text: str) -> None:
    assert parse(text) == [[{"k1": "v1", "k2": "v2"}, {"k1": "v3", "k2": "v4"}]]


def test_triple_nested_compact_sequence() -> None:
    text = "- - - k1: v1\n      k2: v2\n    - k1: v3\n      k2: v4\n"
    assert parse(text) == [[[{"k1": "v1", "k2": "v2"}, {"k1": "v3", "k2": "v4"}]]]


def test_mixed_sequence_items() -> None:
    assert parse("- k1: v1\n- - a\n  - b\n- k2: v2\n") == [
        {"k1": "v1"},
        ["a", "b"],
        {"k2": "v2"},
    ]


def test_empty_collections_and_null_items() -> None:
    assert parse("[]") == []
    assert parse("{}") == {}
    assert parse("-") == [None]
    assert parse("-\n  -\n    -\n") == [[[None]]]
    assert parse("- - -") == [[[None]]]
    assert parse("- - - -") == [[[[None]]]]
    assert parse("a: {}\nb: {}\n") == {"a": {}, "b": {}}


def test_empty_collections_are_fresh_objects() -> None:
    first = parse("a: []\nb: []\n")
    first["a"].append(1)
    assert first["b"] == []
    assert parse("[]") == []


def test_empty_sequence_item_before_sibling() -> None:
    assert parse("-\n- x\n") == [None, "x"]
    assert parse("- a\n-\n- b\n") == ["a", None, "b"]


def test_empty_item_closed_by_undent() -> None:
    assert parse("a:\n  -\nb: 1\n") == {"a": [None], "b": 1}


def test_null_values() -> None:
    doc = YamlDocument("empty:\nkey:\n    empty:\nnull: null\ntilde: ~\nlast:\n")
    assert doc.root == {"empty": None, "key": {"empty": None}, "null": None, "tilde": None, "last": None}


def test_short_documents() -> None:
    assert parse("") is None
    assert parse("~") is None
    assert parse("null") is None
    assert parse('""') == ""
    assert parse("''") == ""
    assert parse("x") == "x"
    assert parse("x x") == "x x"
    assert parse("x:x") == "x:x"
    assert parse("x:") == {"x": None}
    assert parse("x: x") == {"x": "x"}
    assert parse("true") is True
    assert parse("false") is False
    assert parse("123") == 123
    assert parse("45.6") == 45.6


def test_whitespace_around_keys_and_values() -> None:
    text = (
        "key a :\n"
        '- " string "\n'
        "\n"
        "-          {}\n"
        "key b :\n"
        "     - key c' :      z e r o\n"
        "\n"
        "       key\"  d: one\n"
        "     -\n"
        "       key e : two\n"
        "       key f  : three\n"
        "key g:     # comment\n"
        "       true\n"
    )
    assert parse(text) == {
        "key a": [" string ", {}],
        "key b": [
            {"key c'": "z e r o", 'key"  d': "one"},
            {"key e": "two", "key f": "three"},
        ],
        "key g": True,
    }


def test_deep_nesting_and_undent_to_each_level() -> None:
    head = (
        "root:\n"
        "    sub:\n"
        "        greet: hello\n"
        "        lists:\n"
        "            - - - deep\n"
        "                - str: >-\n"
        "                    no\n"
        "                    newlines\n"
    )
    doc = YamlDocument(head + "key: val\n")
    assert doc.get("root", "sub", "lists", 0, 0, 1, "str") == "no newlines"
    assert doc.get("key") == "val"

    assert YamlDocument(head + "    key: val\n").get("root", "key") == "val"
    assert YamlDocument(head + "        key: val\n").get("root", "sub", "key") == "val"
    assert YamlDocument(head + "            - key: val\n").get("root", "sub", "lists", 1, "key") == "val"
    assert (
        YamlDocument(head + "                  key: val\n").get("root", "sub", "lists", 0, 0, 1, "key")
        == "val"
    )
    assert (
        YamlDocument(head + "                - key: val\n").get("root", "sub", "lists", 0, 0, 2, "key")
        == "val"
    )


def test_keys_in_a_row_nest() -> None:
    assert parse("root1: key1: key2: value1\nroot2: value2\n") == {
        "root1": {"key1": {"key2": "value1"}},
        "root2": "value2",
    }


def test_drifting_indentation_is_tolerated() -> None:
    text = "rootmap:\n  k1: v1\n   k2: v2\n    k3: v3\n   rootkey: val\n"
    assert parse(text) == {"rootmap": {"k1": "v1", "k2": "v2", "k3": "v3"}, "rootkey": "val"}


def test_first_line_indentation_is_ignored() -> None:
    assert parse("    a: 1\nb: 2\n") == {"a": 1, "b": 2}


def test_crlf_line_endings() -> None:
    assert parse("a:\r\n  b: 1\r\n  c: |\r\n    x\r\n    y\r\n") == {"a": {"b": 1, "c": "x\ny\n"}}


def test_documents_markers_are_invisible() -> None:
    assert parse("# comment\n--- >\n  long string\n  over 2 lines\n") == "long string over 2 lines\n"
    assert parse("--- - hello\n") == ["hello"]
    assert parse("--- key: val1\n") == {"key": "val1"}
    assert parse("%YAML 1.2 # comment\n--- key: val2\n") == {"key": "val2"}


def test_document_bodies_fuse_into_one_mapping() -> None:
    text = (
        "---\n"
        "time: 20:03:20\n"
        "player: Sammy Sosa\n"
        "action: strike (miss)\n"
        "...\n"
        "---\n"
        "time: 20:03:47\n"
        "player: Sammy Sosa\n"
        "action: grand slam\n"
        "...\n"
    )
    assert parse(text) == {"time": "20:03:47", "player": "Sammy Sosa", "action": "grand slam"}


def test_document_bodies_fuse_into_one_sequence() -> None:
    text = (
        "# Ranking of 1998 home runs\n"
        "---\n"
        "- Mark McGwire\n"
        "- Sammy Sosa\n"
        "\n"
        "# Team ranking\n"
        "---\n"
        "- Chicago Cubs\n"
    )
    assert parse(text) == ["Mark McGwire", "Sammy Sosa", "Chicago Cubs"]


def test_tags_and_anchors_are_ignored() -> None:
    assert parse("name: !!str 5") == {"name": 5}
    assert parse("name: &handle bilbo\nnick: *handle\n") == {"name": "bilbo", "nick": "*handle"}


def test_comments_between_entries() -> None:
    text = "---\nhr: # 1998 hr ranking\n  - Mark McGwire\n  - Sammy Sosa\nrbi:\n  # 1998 rbi ranking\n  - Sammy Sosa\n  - Ken Griffey\n"
    assert parse(text) == {
        "hr": ["Mark McGwire", "Sammy Sosa"],
        "rbi": ["Sammy Sosa", "Ken Griffey"],
    }


def test_aligned_keys_with_padding() -> None:
    text = "---\n# Products purchased\n- item    : Super Hoop\n  quantity: 1\n- item    : Basketball\n  quantity: 4\n"
    assert parse(text) == [
        {"item": "Super Hoop", "quantity": 1},
        {"item": "Basketball", "quantity": 4},
    ]


def test_tagged_sequence_items() -> None:
    text = (
        "%TAG ! tag:clarkevans.com,2002:\n"
        "--- !shape\n"
        "  # Use the ! handle for presenting\n"
        "- !circle\n"
        "  center: &ORIGIN {x: 73, y: 129}\n"
        "  radius: 7\n"
        "- !line\n"
        "  start: *ORIGIN\n"
        "  finish: { x: 89, y: 102 }\n"
    )
    assert parse(text) == [
        {"center": "{x: 73, y: 129}", "radius": 7},
        {"start": "*ORIGIN", "finish": "{ x: 89, y: 102 }"},
    ]


def test_invoice() -> None:
    text = """\
--- !<tag:clarkevans.com,2002:invoice>
invoice: 34843
date   : 2001-01-23
bill-to: &id001
    given  : Chris
    family : Dumars
    address:
        lines: |
            458 Walkman Dr.
            Suite #292
        city    : Royal Oak
        postal  : 48046
ship-to: *id001
product:
    - sku         : BL394D
      quantity    : 4
      price       : 450.00
tax  : 251.42
comments: >
    Late afternoon is best.
    Backup contact is Nancy
    Billsmer @ 338-4338.
"""
    assert parse(text) == {
        "invoice": 34843,
        "date": "2001-01-23",
        "bill-to": {
            "given": "Chris",
            "family": "Dumars",
            "address": {
                "lines": "458 Walkman Dr.\nSuite #292\n",
                "city": "Royal Oak",
                "postal": 48046,
            },
        },
        "ship-to": "*id001",
        "product": [{"sku": "BL394D", "quantity": 4, "price": 450.0}],
        "tax": 251.42,
        "comments": "Late afternoon is best. Backup contact is Nancy Billsmer @ 338-4338.\n",
    }


def test_parsing_twice_yields_equal_trees() -> None:
    text = "a:\n  - x: 1\n    y: [1, 2]\n  - |\n    text\nb: ~\n"
    assert parse(text) == parse(text)


def test_max_depth_is_enforced() -> None:
    text = "- " * 50 + "x"
    assert parse(text, max_depth=60) is not None
    with pytest.raises(StructuralError, match="Maximum nesting depth of 10 exceeded"):
        parse(text, max_depth=10)


def test_pathological_nesting_reports_error_not_crash() -> None:
    with pytest.raises(StructuralError):
        parse("- " * 1000 + "x")
