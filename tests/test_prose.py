import pytest

from lipstyk.prose import MARKDOWN, TEXT, ProseSlopPhrases, ProseStructure
from lipstyk.report import Severity

FILLER = [f"plain line {i}" for i in range(100)]


def _shape(diags):
    return [(d.rule, d.line, d.severity, d.weight) for d in diags]


def _check(lines, lang=TEXT):
    return ProseSlopPhrases().check("\n".join(lines), lang)


def test_too_few_lines_is_skipped():
    assert ProseSlopPhrases().check("robust\nseamless\n", TEXT) == []


def test_text_needs_fewer_hits_than_markdown():
    lines = ["It is robust.", "It is seamless.", "plain line"]
    assert _check(lines, MARKDOWN) == []
    assert [(d.rule, d.severity) for d in _check(lines)] == [("prose-slop-phrases", Severity.SLOP)]


@pytest.mark.parametrize(
    "lines, lang, expected",
    [
        (["It is robust.", *FILLER[:49], "It is seamless.", *FILLER[49:98]], TEXT, (1, Severity.HINT, 0.75)),
        ([*FILLER[:40], "robust", "seamless", "pivotal", *FILLER[40:97]], TEXT, (41, Severity.WARNING, 1.5)),
        (["robust", "seamless", "pivotal", "realm", "delve", *FILLER, *FILLER[:95]], MARKDOWN, (1, Severity.SLOP, 2.5)),
    ],
    ids=["low-density-pair", "three-hits-long-text", "five-hits"],
)
def test_severity_levels(lines, lang, expected):
    assert _shape(_check(lines, lang)) == [("prose-slop-phrases", *expected)]


def test_email_cliches_are_counted():
    diags = _check(["Hi there,", "I hope this email finds you well.", "Looking forward to hearing from you."])
    assert [d.line for d in diags] == [2]
    assert "i hope this email finds you well" in diags[0].message


def test_structure_flags_uniform_paragraphs():
    paragraphs = ["The cat sat. The dog ran."] * 4
    diags = ProseStructure().check("\n\n".join(paragraphs), TEXT)
    assert _shape(diags) == [("prose-structure", 1, Severity.HINT, 0.75)]
    assert diags[0].message.startswith(f"{len(paragraphs)} paragraphs share the same 2-sentence shape")


@pytest.mark.parametrize(
    "paragraphs, lang",
    [
        (["# Heading", "One. Two.", "## Other", "Three. Four.", "Five. Six."], MARKDOWN),
        (["One sentence here."] * 5, TEXT),
        (["A. B.", "A. B. C.", "A.", "A. B. C. D."], TEXT),
    ],
    ids=["headings-skipped", "single-sentence", "varied"],
)
def test_structure_not_flagged(paragraphs, lang):
    assert ProseStructure().check("\n\n".join(paragraphs), lang) == []