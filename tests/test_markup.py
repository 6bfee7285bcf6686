import pytest

from mentionmarkup import InvalidTemplateError
from mentionmarkup.markup import (
    compile_markup,
    get_position_of_capturing_group,
    iterate_mentions_markup,
    markup_to_regex,
)
from mentionmarkup.models import LiteralRun, MentionOccurrence


def test_get_position_of_capturing_group():
    """Test capturing group ranks follow the placeholder order in the template"""
    test_cases = [
        ("@[__display__](__id__)", {"display": 0, "id": 1, "type": None}),
        ("@[__id__](__display__)", {"display": 1, "id": 0, "type": None}),
        ("{{__type__:__id__|__display__}}", {"display": 2, "id": 1, "type": 0}),
        ("<__display__ __type__ __id__>", {"display": 0, "id": 2, "type": 1}),
        # A missing __display__ or __id__ aliases the other group
        ("@__id__", {"display": 0, "id": 0, "type": None}),
        ("[__display__]", {"display": 0, "id": 0, "type": None}),
        ("__type__:__display__", {"display": 1, "id": 1, "type": 0}),
    ]

    for markup, expected in test_cases:
        for parameter_name, expected_position in expected.items():
            actual = get_position_of_capturing_group(markup, parameter_name)
            assert (
                actual == expected_position
            ), f"Expected {parameter_name} at {expected_position}, got {actual} for markup: {markup}"


def test_invalid_templates():
    """Test templates without __id__ and __display__ are rejected"""
    for markup in ["no placeholders", "[__type__]", ""]:
        with pytest.raises(InvalidTemplateError):
            get_position_of_capturing_group(markup, "id")

    with pytest.raises(InvalidTemplateError):
        get_position_of_capturing_group("@[__display__](__id__)", "name")

    # Template errors are also value errors
    with pytest.raises(ValueError):
        compile_markup("no placeholders")


def test_markup_to_regex():
    """Test the regex matches template occurrences and captures the placeholders"""
    regex = markup_to_regex("@[__display__](__id__)")
    match = regex.search("Hi @[John](u1), how are you?")

    assert match is not None
    assert match.group(0) == "@[John](u1)"
    assert match.groups() == ("John", "u1")

    anchored = markup_to_regex("@[__display__](__id__)", match_at_end=True)
    assert anchored.search("Hi @[John](u1), how are you?") is None
    assert anchored.search("Hi @[John](u1)").group(0) == "@[John](u1)"
    assert anchored.search("Hi @[John](u1)\n") is None


def test_placeholders_do_not_span_line_terminators():
    """Test a display or id containing a line terminator is not a mention"""
    regex = markup_to_regex("@[__display__](__id__)")

    for separator in ["\n", "\r", "\u2028", "\u2029"]:
        value = f"Hi @[Jo{separator}hn](u1) and @[Jane](u{separator}2)"
        assert regex.search(value) is None, f"Matched across {separator!r}"

    assert regex.search("Hi @[John Doe](u1)").groups() == ("John Doe", "u1")


def test_iterate_mentions_markup():
    """Test the scanner yields literal runs and mentions in source order"""
    test_cases = [
        (
            "Hi @[John](u1), how are you?",
            [
                LiteralRun("Hi ", 0, 0),
                MentionOccurrence("@[John](u1)", 3, 3, "u1", "John", None, 0),
                LiteralRun(", how are you?", 14, 7),
            ],
        ),
        # Touching mentions are separated by empty literal runs
        (
            "@[a](1)@[b](2)",
            [
                LiteralRun("", 0, 0),
                MentionOccurrence("@[a](1)", 0, 0, "1", "a", None, 0),
                LiteralRun("", 7, 1),
                MentionOccurrence("@[b](2)", 7, 1, "2", "b", None, 7),
            ],
        ),
        ("no mentions here", [LiteralRun("no mentions here", 0, 0)]),
        ("", []),
    ]

    for value, expected_events in test_cases:
        actual_events = list(
            iterate_mentions_markup(value, "@[__display__](__id__)")
        )
        assert (
            actual_events == expected_events
        ), f"Expected {expected_events}, got {actual_events} for value: {value}"


def test_iterate_mentions_markup_with_type_and_transform():
    """Test the mention type is captured and transformed displays shift offsets"""
    events = list(
        iterate_mentions_markup(
            "see {{user:u1|John}} now",
            "{{__type__:__id__|__display__}}",
            lambda id, display, type: f"{type}:{display}",
        )
    )

    assert events == [
        LiteralRun("see ", 0, 0),
        MentionOccurrence("{{user:u1|John}}", 4, 4, "u1", "user:John", "user", 0),
        LiteralRun(" now", 20, 13),
    ]
    assert events[1].end_index == 20
