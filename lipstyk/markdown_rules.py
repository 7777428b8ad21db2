"""Rules that look for generated-looking patterns in Markdown documents."""

from __future__ import annotations

from collections.abc import Iterable

from lipstyk.report import Diagnostic, Severity

_SLOP = (Severity.SLOP, 2.5)
_WARN = (Severity.WARNING, 1.5)
_HINT = (Severity.HINT, 0.75)

_PLACEHOLDER_PATTERNS = (
    "your-project",
    "your-app",
    "your-name",
    "your-username",
    "your-api-key",
    "your-token",
    "your project",
    "your app",
    "insert ",
    "replace with",
    "add description here",
    "description here",
    "enter your",
    "fill in",
)

_GENERIC_OPENERS = (
    "a comprehensive",
    "this project is a",
    "this is a simple",
    "this repository contains",
    "welcome to the",
    "this tool provides",
    "this library offers",
    "this package is designed",
)

_SLOP_WORDS = (
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
    "it's important to note",
    "it's worth noting",
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
)


class _LineRule:
    """Shared plumbing for rules that scan a source line by line."""

    name = ""
    langs: tuple[str, ...] = ()

    @staticmethod
    def _lines(text: str) -> list[str]:
        """Split text into lines, dropping a trailing empty line and any ``\\r``."""
        parts = text.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return [p[:-1] if p.endswith("\r") else p for p in parts]

    def _finding(self, message: str, line: int, severity: Severity, weight: float) -> Diagnostic:
        return Diagnostic(rule=self.name, message=message, line=line, severity=severity, weight=weight)


def _count_phrases(lines: list[str], phrases: Iterable[str]) -> tuple[int, int, list[str]]:
    """Count phrase hits per line; return the count, first hit line and distinct phrases."""
    phrases = tuple(phrases)
    count = 0
    first_line = 0
    matched: list[str] = []
    for number, line in enumerate(lines, start=1):
        lower = line.lower()
        for phrase in (p for p in phrases if p in lower):
            count += 1
            first_line = first_line or number
            if phrase not in matched:
                matched.append(phrase)
    return count, first_line, matched


class Placeholders(_LineRule):
    """Flags placeholder text and generic opening paragraphs left by scaffolding."""

    name = "md-placeholder"
    langs = ("markdown",)

    def check(self, source: str) -> list[Diagnostic]:
        lines = self._lines(source)
        diagnostics: list[Diagnostic] = []

        hits = [
            number
            for number, line in enumerate(lines, start=1)
            if any(pattern in line.lower() for pattern in _PLACEHOLDER_PATTERNS)
        ]
        if len(hits) >= 2:
            message = f"{len(hits)} placeholder strings — fill in or remove template content"
            diagnostics.append(self._finding(message, hits[0], *_WARN))

        body = [l for l in lines if l.strip() and not l.strip().startswith("#")]
        opening = " ".join(body[:3]).lower()
        opener = next((o for o in _GENERIC_OPENERS if o in opening), None)
        if opener is not None:
            message = (
                f'generic opening paragraph ("{opener}...") — '
                "write something specific to this project"
            )
            diagnostics.append(self._finding(message, 1, Severity.HINT, 1.0))

        return diagnostics


class SlopPhrases(_LineRule):
    """Flags a high density of buzzwords typical of generated documentation."""

    name = "md-slop-phrases"
    langs = ("markdown",)

    def check(self, source: str) -> list[Diagnostic]:
        lines = self._lines(source)
        if len(lines) < 10:
            return []

        count, first_line, matched = _count_phrases(lines, _SLOP_WORDS)
        if count < 3:
            return []

        density = count / (len(lines) / 100.0)
        level = _SLOP if density > 5.0 else _WARN
        examples = ", ".join(matched[:5])
        message = f"{count} AI buzzwords ({examples}) — {density:.1f} per 100 lines"
        return [self._finding(message, first_line, *level)]


class Structure(_LineRule):
    """Flags overly deep headings and uniform, template-like section layouts."""

    name = "md-structure"
    langs = ("markdown",)

    def check(self, source: str) -> list[Diagnostic]:
        lines = self._lines(source)
        return [*self._heading_depth(lines), *self._uniform_structure(lines)]

    def _heading_depth(self, lines: list[str]) -> list[Diagnostic]:
        deep = [
            number
            for number, line in enumerate(lines, start=1)
            if line.strip().startswith(("##### ", "###### "))
        ]
        if len(deep) < 3:
            return []
        message = f"{len(deep)} headings at depth 5+ — flatten the hierarchy"
        return [self._finding(message, deep[0], *_HINT)]

    def _uniform_structure(self, lines: list[str]) -> list[Diagnostic]:
        child_counts: list[int] = []
        current: int | None = None
        for line in lines:
            trimmed = line.strip()
            if trimmed.startswith("## ") and not trimmed.startswith("### "):
                if current is not None:
                    child_counts.append(current)
                current = 0
            elif trimmed.startswith("### ") and not trimmed.startswith("#### "):
                if current is not None:
                    current += 1
        if current is not None:
            child_counts.append(current)

        if len(child_counts) < 4:
            return []
        non_zero = [c for c in child_counts if c > 0]
        if len(non_zero) < 4 or len(set(non_zero)) != 1:
            return []
        message = (
            f"all {len(non_zero)} sections have exactly {non_zero[0]} subsections"
            " — template-generated structure"
        )
        return [self._finding(message, 1, *_WARN)]