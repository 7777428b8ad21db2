"""Rules for low-signal natural-language patterns in prose documents.

Findings are evidence of slop density, not proof of authorship.
"""

from __future__ import annotations

import re

from lipstyk.report import Diagnostic, Severity

MARKDOWN = "markdown"
TEXT = "text"

_BUZZWORDS = (
    "comprehensive",
    "robust",
    "seamless",
    "leverage",
    "utilize",
    "streamline",
    "harness",
    "delve",
    "pivotal",
    "cutting-edge",
    "landscape",
    "tapestry",
    "realm",
    "underpinnings",
    "furthermore",
    "moreover",
    "in today's",
    "plays a crucial role",
    "in conclusion",
    "this ensures",
    "this allows",
    "this enables",
    "highly configurable",
    "out of the box",
    "under the hood",
    "at its core",
    "in a nutshell",
    "unlock",
    "drive impact",
    "transformative",
    "elevate",
    "empower",
    "game-changer",
)

# Stock e-mail phrasing, kept as word sequences and matched as joined phrases.
_EMAIL_CLICHE_WORDS = (
    ("i", "hope", "this", "email", "finds", "you", "well"),
    ("i", "wanted", "to", "take", "a", "moment"),
    ("thank", "you", "for", "reaching", "out"),
    ("please", "don't", "hesitate", "to", "reach", "out"),
    ("let", "me", "know", "if", "you", "have", "any", "questions"),
    ("i", "appreciate", "your", "time", "and", "consideration"),
    ("looking", "forward", "to", "hearing", "from", "you"),
)
_EMAIL_CLICHES = tuple(" ".join(words) for words in _EMAIL_CLICHE_WORDS)

_PHRASES = (*_BUZZWORDS, *_EMAIL_CLICHES)

_SENTENCE_END = re.compile(r"[.!?]")


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


class ProseSlopPhrases:
    """Flags buzzwords and e-mail clichés common in generated prose."""

    name = "prose-slop-phrases"
    langs = (MARKDOWN, TEXT)

    def check(self, source: str, lang: str = TEXT) -> list[Diagnostic]:
        lines = _lines(source)
        total_lines = len(lines)
        if total_lines < 3:
            return []

        count = 0
        first_line = 0
        matched: list[str] = []
        for number, line in enumerate(lines, start=1):
            lower = line.lower()
            for phrase in _PHRASES:
                if phrase in lower:
                    count += 1
                    if first_line == 0:
                        first_line = number
                    if phrase not in matched:
                        matched.append(phrase)

        min_count = 2 if lang == TEXT else 3
        if count < min_count:
            return []

        density = count / (total_lines / 100.0)
        if count >= 5 or density > 8.0:
            severity, weight = Severity.SLOP, 2.5
        elif count >= 3 or density > 4.0:
            severity, weight = Severity.WARNING, 1.5
        else:
            severity, weight = Severity.HINT, 0.75

        examples = ", ".join(matched[:5])
        return [
            Diagnostic(
                rule=self.name,
                message=(
                    f"{count} low-signal prose phrases ({examples}) — "
                    f"{density:.1f} per 100 lines"
                ),
                line=first_line,
                severity=severity,
                weight=weight,
            )
        ]


class ProseStructure:
    """Flags paragraphs that all share the same sentence count."""

    name = "prose-structure"
    langs = (MARKDOWN, TEXT)

    def check(self, source: str, lang: str = TEXT) -> list[Diagnostic]:
        paragraphs = [
            p
            for p in (chunk.strip() for chunk in source.split("\n\n"))
            if p and not p.startswith("#")
        ]
        if len(paragraphs) < 4:
            return []

        counts = [max(len(_SENTENCE_END.findall(p)), 1) for p in paragraphs]
        first = counts[0]
        same = counts.count(first)
        if same >= 4 and first >= 2:
            return [
                Diagnostic(
                    rule=self.name,
                    message=(
                        f"{same} paragraphs share the same {first}-sentence shape"
                        " — template-like prose rhythm"
                    ),
                    line=1,
                    severity=Severity.HINT,
                    weight=0.75,
                )
            ]
        return []