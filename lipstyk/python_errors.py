"""Rules that flag broad or swallowed exception handling in Python code."""

from __future__ import annotations

from lipstyk.markdown_rules import _HINT, _LineRule, _SLOP, _WARN
from lipstyk.report import Diagnostic, Severity

PYTHON = "python"

_BARE_FORMS = frozenset({"except:", "except Exception:", "except Exception as e:"})

_BROAD_FORMS = frozenset(
    {
        "except Exception:",
        "except Exception as e:",
        "except BaseException:",
        "except BaseException as e:",
    }
)

_LOG_PREFIXES = ("print(", "logging.")


def _stripped_at(lines: list[str], index: int) -> str:
    """Return the stripped line at ``index``, or an empty string past the end."""
    return lines[index].strip() if index < len(lines) else ""


class BareExcept(_LineRule):
    """Flags bare ``except:`` and ``except Exception:`` clauses that swallow errors."""

    name = "bare-except"
    langs = (PYTHON,)

    def check(self, source: str) -> list[Diagnostic]:
        lines = self._lines(source)
        diagnostics: list[Diagnostic] = []

        for index, line in enumerate(lines):
            trimmed = line.strip()
            if trimmed not in _BARE_FORMS:
                continue

            following = _stripped_at(lines, index + 1)
            is_swallowed = following == "pass" or following.startswith(_LOG_PREFIXES) or not following

            if trimmed == "except:":
                level = _SLOP
            else:
                level = _WARN if is_swallowed else _HINT
            message = f"`{trimmed}` — catch specific exceptions"
            diagnostics.append(self._finding(message, index + 1, *level))

        return diagnostics


class ErrorHandling(_LineRule):
    """Flags broad excepts that only pass or log, and files full of broad excepts."""

    name = "py-error-handling"
    langs = (PYTHON,)

    def check(self, source: str) -> list[Diagnostic]:
        lines = self._lines(source)
        diagnostics: list[Diagnostic] = []
        broad_count = 0

        for index, line in enumerate(lines):
            if line.strip() not in _BROAD_FORMS:
                continue
            broad_count += 1
            if index + 1 >= len(lines):
                continue

            following = lines[index + 1].strip()
            if following == "pass":
                message = "broad except with `pass` — catch specific exceptions and handle them"
                diagnostics.append(self._finding(message, index + 1, *_SLOP))
            elif following.startswith(_LOG_PREFIXES):
                after = _stripped_at(lines, index + 2)
                if not after or not after.startswith(" ") or after.startswith(("except", "finally")):
                    message = "broad except only logs — consider re-raising or returning an error"
                    diagnostics.append(self._finding(message, index + 1, *_WARN))

        if broad_count >= 3:
            message = f"{broad_count} broad except blocks — define specific exception types"
            diagnostics.append(self._finding(message, 1, Severity.WARNING, 2.0))

        return diagnostics