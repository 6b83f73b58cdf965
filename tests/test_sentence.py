"""Tests for the regex sentence splitter."""

from sentseg import RegexSplitter, Sentence
from sentseg._sentence import split_sentences


def test_empty():
    assert split_sentences("") == []
    assert split_sentences("   ") == []


def test_single_sentence():
    result = split_sentences("Hello world.")
    assert len(result) == 1


def test_two_sentences():
    result = split_sentences("Hello world. This is a test.")
    assert result == ["Hello world.", "This is a test."]


def test_question_mark():
    result = split_sentences("What is this? It is a test.")
    assert len(result) == 2


def test_exclamation():
    result = split_sentences("Stop! That is enough.")
    assert len(result) == 2


def test_abbreviation_mr():
    """Mr. should not trigger a split."""
    result = split_sentences("Mr. Smith went to Washington. He was happy.")
    assert len(result) == 2
    assert "Mr" in result[0]


def test_abbreviation_dr():
    """Dr. should not trigger a split."""
    result = split_sentences("Dr. Jones is here. She is busy.")
    assert len(result) == 2


def test_abbreviation_with_inner_period():
    result = split_sentences("Bring fruit, e.g. Apples or pears. Then leave.")
    assert len(result) == 2


def test_abbreviation_only_at_word_start():
    """'no' inside 'piano' is not an abbreviation."""
    result = split_sentences("He played the piano. Everyone listened.")
    assert len(result) == 2


def test_initials():
    result = split_sentences("J. R. Smith arrived. He sat down.")
    assert result == ["J. R. Smith arrived.", "He sat down."]


def test_no_capital_after_period():
    """Period followed by lowercase should not split."""
    result = split_sentences("The value is 3.14 approximately.")
    assert len(result) == 1


def test_year_before_boundary():
    result = split_sentences("We met in 2020. Then we left.")
    assert len(result) == 2


def test_closing_quote():
    result = split_sentences('He said "Stop." Then he left.')
    assert result == ['He said "Stop."', "Then he left."]


def test_ellipsis():
    result = split_sentences("Wait... What happened?")
    assert len(result) == 2


def test_multiline():
    text = """The neural pathways connect through axons.
    Synaptic transmission occurs at junctions. The market surged today."""
    result = split_sentences(text)
    assert len(result) == 3


def test_spans_are_offsets():
    text = "  Hello world.   This is a test.  "
    spans = RegexSplitter().spans(text)
    assert [text[s:e] for s, e in spans] == ["Hello world.", "This is a test."]
    assert spans[0] == (2, 14)


def test_segment_returns_sentences():
    text = "Hello world. This is a test."
    result = RegexSplitter().segment(text)
    assert result == [
        Sentence(text="Hello world.", start=0, end=12),
        Sentence(text="This is a test.", start=13, end=28),
    ]


def test_custom_abbreviations():
    text = "He studied at Harvard Univ. Boston is nice."
    assert len(RegexSplitter().split(text)) == 2
    splitter = RegexSplitter(["Univ."])
    assert len(splitter.split(text)) == 1
    assert "univ" in splitter.abbreviations
    assert "mr" in splitter.abbreviations


def test_empty_abbreviations_keep_defaults():
    splitter = RegexSplitter([])
    assert len(splitter.split("Dr. Jones is here. She is busy.")) == 2


def test_always_operational():
    splitter = RegexSplitter()
    assert splitter.operational() is True
    assert splitter.failure_reason() is None
    assert splitter.name == "regex"


def test_no_instance_dict():
    assert not hasattr(RegexSplitter(), "__dict__")
