"""Rules for non-idiomatic or leftover patterns in Python code."""

from __future__ import annotations

from lipstyk.markdown_rules import _HINT, _LineRule, _WARN
from lipstyk.report import Diagnostic, Severity

PYTHON = "python"

_DEF_PREFIXES = ("def ", "async def ")

_MUTABLE_DEFAULTS = ("=[]", "= []", "={}", "= {}", "=set()", "= set()")


class _PythonRule(_LineRule):
    langs = (PYTHON,)

    def _stripped(self, source: str) -> list[tuple[int, str]]:
        """Return ``(line number, stripped line)`` pairs for the source."""
        return [(number, line.strip()) for number, line in enumerate(self._lines(source), start=1)]


class ImportStar(_PythonRule):
    """Flags wildcard imports and files with an excessive number of imports."""

    name = "import-star"

    def check(self, source: str) -> list[Diagnostic]:
        lines = self._stripped(source)
        diagnostics = [
            self._finding(f"`{trimmed}` — import specific names", number, *_WARN)
            for number, trimmed in lines
            if trimmed.startswith("from ") and "import *" in trimmed
        ]
        import_count = sum(trimmed.startswith(("import ", "from ")) for _, trimmed in lines)
        if import_count >= 20:
            message = f"{import_count} imports — are all of these used?"
            diagnostics.append(self._finding(message, 1, *_HINT))
        return diagnostics


class IndexLoop(_PythonRule):
    """Flags ``for i in range(len(x))`` loops."""

    name = "py-index-loop"

    def check(self, source: str) -> list[Diagnostic]:
        message = "C-style `for i in range(len(x))` — use `for item in x` or `enumerate()`"
        return [
            self._finding(message, number, *_WARN)
            for number, trimmed in self._stripped(source)
            if trimmed.startswith("for ") and "range(len(" in trimmed
        ]


class MutableDefault(_PythonRule):
    """Flags list, dict and set literals used as default argument values."""

    name = "py-mutable-default"

    def check(self, source: str) -> list[Diagnostic]:
        message = "mutable default argument — use `None` and initialize inside the function"
        return [
            self._finding(message, number, *_WARN)
            for number, trimmed in self._stripped(source)
            if trimmed.startswith(_DEF_PREFIXES)
            and "(" in trimmed
            and any(p in trimmed[trimmed.index("(") :] for p in _MUTABLE_DEFAULTS)
        ]


class PrintDebug(_PythonRule):
    """Flags ``print()`` debugging left in library code; CLI scripts are exempt."""

    name = "print-debug"

    def check(self, source: str) -> list[Diagnostic]:
        if "if __name__" in source or "argparse" in source:
            return []

        hits = [
            number
            for number, trimmed in self._stripped(source)
            if not trimmed.startswith("#") and (trimmed.startswith("print(") or " print(" in trimmed)
        ]
        if len(hits) < 3:
            return []

        level = (Severity.SLOP, 3.0) if len(hits) > 10 else _WARN
        message = f"{len(hits)} print() calls — use logging module or remove debug output"
        return [self._finding(message, hits[0], *level)]


class TypeHintGaps(_PythonRule):
    """Flags files where only some functions carry return type hints."""

    name = "type-hint-gaps"

    def check(self, source: str) -> list[Diagnostic]:
        defs = [trimmed for _, trimmed in self._stripped(source) if trimmed.startswith(_DEF_PREFIXES)]
        total = len(defs)
        if total < 4:
            return []

        hinted = sum("->" in d for d in defs)
        if not 0.2 < hinted / total < 0.8:
            return []
        message = f"{hinted}/{total} functions have type hints — be consistent"
        return [self._finding(message, 1, Severity.HINT, 1.0)]