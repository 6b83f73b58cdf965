"""Tests for the ordered document aggregate."""

from sentseg import Document, RegexSplitter, Sentence


def test_new_document_is_empty():
    doc = Document()
    assert doc.id is None
    assert len(doc) == 0
    assert list(doc) == []


def test_append_on_fresh_document():
    """The backing sequence exists from construction."""
    doc = Document()
    doc.add_sentence("First.")
    assert list(doc) == ["First."]


def test_scenario_id_and_order():
    s1 = Sentence(text="One.", start=0, end=4)
    s2 = Sentence(text="Two.", start=5, end=9)
    d = Document()
    d.id = "doc-1"
    d.add_sentence(s1)
    d.add_sentence(s2)
    assert d.id == "doc-1"
    assert list(d) == [s1, s2]


def test_insertion_order_preserved():
    doc = Document("d")
    items = [f"sentence {i}" for i in range(50)] + ["sentence 3"]
    for item in items:
        doc.add_sentence(item)
    assert list(doc) == items
    assert len(doc) == len(items)
    assert doc.sentences == tuple(items)


def test_id_last_write_wins():
    doc = Document()
    doc.id = "A"
    doc.id = "B"
    assert doc.id == "B"


def test_id_from_constructor():
    assert Document("doc-7").id == "doc-7"


def test_sentences_is_a_snapshot():
    doc = Document()
    doc.add_sentence("a")
    snapshot = doc.sentences
    doc.add_sentence("b")
    assert snapshot == ("a",)
    assert doc.sentences == ("a", "b")


def test_extend():
    doc = Document()
    doc.add_sentence("a")
    doc.extend(["b", "c"])
    assert list(doc) == ["a", "b", "c"]


def test_from_text():
    text = "Mr. Smith went to Washington. He was happy."
    doc = Document.from_text(text, RegexSplitter(), id="news-1")
    assert doc.id == "news-1"
    assert [s.text for s in doc] == ["Mr. Smith went to Washington.", "He was happy."]
    assert all(isinstance(s, Sentence) for s in doc)
    assert doc.sentences[1].start == text.index("He")


def test_repr():
    doc = Document("x")
    doc.add_sentence("a")
    assert repr(doc) == "Document(id='x', n_sentences=1)"
