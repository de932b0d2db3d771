import itertools

import pytest
from packages.engine import (
    LetterSet,
    PositionalConstraint,
    check_inputs,
    extract_positions,
    filter_words,
    run_passes,
)

ZE = ["zebra", "zebub", "zeism", "zeist", "zemmi", "zemni", "zerda", "zesty"]
MIXED = ZE + ["abbey", "crane", "raise", "stare", "trace", "sassy", "rebus"]


# --- pattern extraction ---
@pytest.mark.parametrize("pattern,expected", [
    ("ze---", {0: "z", 1: "e"}),
    ("-u-e-", {1: "u", 3: "e"}),
    ("-----", {}),
    ("crane", {0: "c", 1: "r", 2: "a", 3: "n", 4: "e"}),
    ("", {}),
])
def test_extract_positions(pattern, expected):
    assert extract_positions(pattern) == expected


def test_extract_positions_custom_placeholder():
    assert extract_positions("z?b??", placeholder="?") == {0: "z", 2: "b"}


# --- single filtering step ---
def test_filter_positional_keeps_matching_words():
    out = filter_words(MIXED, PositionalConstraint({0: "z", 1: "e"}))
    assert out == ZE


def test_filter_required_letters():
    assert filter_words(ZE, LetterSet("r")) == ["zebra", "zerda"]


def test_filter_excluded_letters():
    assert filter_words(["zebra", "zerda"], LetterSet("d", present=False)) == ["zebra"]


def test_required_letters_check_presence_not_count():
    words = ["sassy", "stare", "crane"]
    assert filter_words(words, LetterSet("ss")) == filter_words(words, LetterSet("s"))
    assert filter_words(words, LetterSet("ss")) == ["sassy", "stare"]


def test_empty_constraints_keep_everything():
    assert filter_words(MIXED, PositionalConstraint({})) == MIXED
    assert filter_words(MIXED, LetterSet("")) == MIXED
    assert filter_words(MIXED, LetterSet("", present=False)) == MIXED


def test_positional_index_past_end_never_matches():
    assert filter_words(["zebra"], PositionalConstraint({7: "x"})) == []


def test_filter_does_not_mutate_input():
    words = list(MIXED)
    filter_words(words, LetterSet("aeiou", present=False))
    assert words == MIXED


def test_unknown_constraint_kind_rejected():
    class Bogus:
        kind = "shape"

    with pytest.raises(TypeError):
        filter_words(MIXED, Bogus())


# --- the three passes ---
def test_run_passes_narrows_monotonically():
    stages = run_passes(MIXED, {0: "z", 1: "e"}, "r", "d")
    assert stages[0] == ZE
    assert stages[1] == ["zebra", "zerda"]
    assert stages[2] == ["zebra"]
    prev = set(MIXED)
    for s in stages:
        assert set(s) <= prev
        prev = set(s)


def test_pass_order_does_not_change_result():
    constraints = [
        PositionalConstraint({1: "e"}),
        LetterSet("r"),
        LetterSet("d", present=False),
    ]
    results = set()
    for perm in itertools.permutations(constraints):
        words = MIXED
        for c in perm:
            words = filter_words(words, c)
        results.add(tuple(sorted(words)))
    assert len(results) == 1


@pytest.mark.parametrize("pattern,required,excluded", [
    ("ze---", "", ""),
    ("-r---", "a", "z"),
    ("--a--", "er", "ty"),
    ("-----", "s", "c"),
])
def test_output_satisfies_every_constraint(pattern, required, excluded):
    positions = extract_positions(pattern)
    out = run_passes(MIXED, positions, required, excluded)[-1]
    for w in out:
        assert all(w[i] == ch for i, ch in positions.items())
        assert all(ch in w for ch in required)
        assert not any(ch in w for ch in excluded)


def test_excluding_every_letter_yields_empty_list():
    assert run_passes(ZE, {}, "", "abcdefghijklmnopqrstuvwxyz")[-1] == []


# --- input checks ---
def test_check_inputs_clean():
    assert check_inputs("ze---", "r", "dfsol", 5) == []


def test_check_inputs_flags_problems():
    issues = check_inputs("ze--", "r1", "rz", 5)
    assert any("length" in msg for msg in issues)
    assert any("required letters contain non-letter" in msg for msg in issues)
    assert any("both required and excluded" in msg for msg in issues)
    assert any("pattern letters also excluded" in msg for msg in issues)


def test_check_inputs_flags_non_letters_in_pattern_and_excluded():
    issues = check_inputs("z3---", "", "d!", 5)
    assert any("pattern contains non-letter" in msg for msg in issues)
    assert any("excluded letters contain non-letter" in msg for msg in issues)


@pytest.mark.parametrize("placeholder", ["--", ""])
def test_check_inputs_flags_bad_placeholder(placeholder):
    issues = check_inputs("ze---", "", "", 5, placeholder=placeholder)
    assert any("single character" in msg for msg in issues)
