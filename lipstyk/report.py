"""Diagnostics, per-file scores and the aggregate report built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Iterable, Mapping

VERSION = "0.2.0"


class Severity(Enum):
    """How strongly a finding points at generated code."""

    HINT = "hint"
    WARNING = "warning"
    SLOP = "slop"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding produced by a rule."""

    rule: str
    message: str
    line: int
    severity: Severity
    weight: float


@dataclass
class SlopScore:
    """All findings for one file together with their summed weight."""

    file: str
    total: float = 0.0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def from_diagnostics(cls, file: str, diagnostics: Iterable[Diagnostic]) -> SlopScore:
        """Build a score whose total is the sum of the diagnostics' weights."""
        found = list(diagnostics)
        return cls(file=file, total=sum(d.weight for d in found), diagnostics=found)


@dataclass(frozen=True)
class GitInfo:
    branch: str
    commit: str
    dirty: bool


@dataclass
class SeverityCounts:
    hint: int = 0
    warning: int = 0
    slop: int = 0

    def add(self, severity: Severity) -> None:
        attr = severity.value
        setattr(self, attr, getattr(self, attr) + 1)


@dataclass
class RuleStats:
    count: int = 0
    total_weight: float = 0.0


@dataclass
class CategoryStats:
    count: int = 0
    total_weight: float = 0.0
    rules: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FileDiagnostic:
    """A diagnostic annotated with the category of its rule."""

    rule: str
    category: str
    message: str
    line: int
    severity: Severity
    weight: float


@dataclass
class FileResult:
    file: str
    score: float
    lines: int
    score_per_100_lines: float
    diagnostics: list[FileDiagnostic] = field(default_factory=list)


@dataclass
class Summary:
    files_scanned: int
    files_with_findings: int
    total_score: float
    total_diagnostics: int
    by_severity: SeverityCounts
    by_rule: dict[str, RuleStats]
    by_category: dict[str, CategoryStats]


@dataclass
class Report:
    """The single artifact that drives dashboards, CI and integrations."""

    version: str
    timestamp: str
    duration_ms: int
    git: GitInfo | None
    summary: Summary
    files: list[FileResult]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; ``git`` is left out when unknown."""
        out: dict[str, Any] = {
            "version": self.version,
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
        }
        if self.git is not None:
            out["git"] = {
                "branch": self.git.branch,
                "commit": self.git.commit,
                "dirty": self.git.dirty,
            }
        s = self.summary
        out["summary"] = {
            "files_scanned": s.files_scanned,
            "files_with_findings": s.files_with_findings,
            "total_score": s.total_score,
            "total_diagnostics": s.total_diagnostics,
            "by_severity": {
                "hint": s.by_severity.hint,
                "warning": s.by_severity.warning,
                "slop": s.by_severity.slop,
            },
            "by_rule": {
                name: {"count": st.count, "total_weight": st.total_weight}
                for name, st in sorted(s.by_rule.items())
            },
            "by_category": {
                name: {
                    "count": st.count,
                    "total_weight": st.total_weight,
                    "rules": list(st.rules),
                }
                for name, st in sorted(s.by_category.items())
            },
        }
        out["files"] = [
            {
                "file": f.file,
                "score": f.score,
                "lines": f.lines,
                "score_per_100_lines": f.score_per_100_lines,
                "diagnostics": [
                    {
                        "rule": d.rule,
                        "category": d.category,
                        "message": d.message,
                        "line": d.line,
                        "severity": d.severity.value,
                        "weight": d.weight,
                    }
                    for d in f.diagnostics
                ],
            }
            for f in self.files
        ]
        return out


# Rules grouped under the category reports file them in.
_RULES_BY_CATEGORY: dict[str, tuple[str, ...]] = {
    "error-handling": (
        "unwrap-overuse error-swallowing boxed-error bare-except java-bare-catch "
        "ts-error-handling py-error-handling go-error-handling"
    ).split(),
    "ownership": "redundant-clone string-params needless-lifetimes".split(),
    "idiom": "verbose-match index-loop needless-type-annotation".split(),
    "naming": (
        "generic-naming generic-todo ts-generic-naming py-generic-naming "
        "java-generic-naming go-generic-naming"
    ).split(),
    "documentation": (
        "restating-comment over-documentation comment-clustering "
        "ts-restating-comment py-restating-comment ts-comment-depth "
        "py-comment-depth java-comment-depth java-restating-comment "
        "go-restating-comment go-comment-depth md-slop-phrases md-structure "
        "md-placeholder prose-slop-phrases prose-structure"
    ).split(),
    "structure": (
        "trivial-wrapper ts-trivial-wrapper py-trivial-wrapper pub-overuse "
        "derive-stacking dead-code-markers"
    ).split(),
    "statistical": (
        "whitespace-uniformity structural-repetition ts-structural-repetition "
        "py-structural-repetition naming-entropy ts-naming-entropy "
        "py-naming-entropy go-structural-repetition go-naming-entropy"
    ).split(),
    "html-structure": "div-soup missing-semantics generic-classes".split(),
    "css": "inline-styles css-smells".split(),
    "accessibility": ["accessibility"],
    "ts-quality": "any-abuse promise-antipattern".split(),
    "debug-output": "console-dump print-debug".split(),
    "ts-idiom": "nested-ternary ts-nesting-depth ts-redundant-async".split(),
    "py-quality": (
        "py-nesting-depth py-index-loop py-mutable-default type-hint-gaps"
    ).split(),
    "py-structure": ["import-star"],
    "cross-file": (
        "cross-file-duplicate cross-file-imports cross-file-error-pattern"
    ).split(),
    "shell": "sh-strict-mode sh-unquoted-var sh-antipattern".split(),
    "docker": ["docker-best-practices"],
    "kubernetes": ["k8s-manifest"],
    "ci-cd": ["ci-workflow"],
    "go-quality": "go-antipattern go-nesting-depth".split(),
}

_CATEGORY_BY_RULE: dict[str, str] = {
    rule: category
    for category, rules in _RULES_BY_CATEGORY.items()
    for rule in rules
}


def rule_category(rule: str) -> str:
    """Map a rule name to its category, or ``"other"`` if it is unknown."""
    return _CATEGORY_BY_RULE.get(rule, "other")


def _count_lines(text: str) -> int:
    """Count lines the way a newline-terminated line iterator does."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def _round1(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    scaled = value * 10.0
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return rounded / 10.0


def _duration_ms(duration: timedelta | float | int) -> int:
    if isinstance(duration, timedelta):
        return int(duration / timedelta(milliseconds=1))
    return int(duration * 1000)


def build_report(
    scores: Iterable[SlopScore],
    files_scanned: int,
    sources: Mapping[str, str],
    duration: timedelta | float | int,
    git: GitInfo | None,
) -> Report:
    """Aggregate per-file scores into a report; ``duration`` is a timedelta or seconds."""
    timestamp = datetime.now(timezone.utc).isoformat()

    by_severity = SeverityCounts()
    by_rule: dict[str, RuleStats] = {}
    by_category: dict[str, CategoryStats] = {}
    total_diagnostics = 0
    total_score = 0.0
    files_with_findings = 0
    file_results: list[FileResult] = []

    for score in scores:
        if score.diagnostics:
            files_with_findings += 1
        total_score += score.total
        total_diagnostics += len(score.diagnostics)

        line_count = _count_lines(sources.get(score.file, ""))
        per_100 = score.total / line_count * 100.0 if line_count > 0 else 0.0

        file_diagnostics = []
        for d in score.diagnostics:
            by_severity.add(d.severity)

            rule_stats = by_rule.setdefault(d.rule, RuleStats())
            rule_stats.count += 1
            rule_stats.total_weight += d.weight

            category = rule_category(d.rule)
            cat_stats = by_category.setdefault(category, CategoryStats())
            cat_stats.count += 1
            cat_stats.total_weight += d.weight
            if d.rule not in cat_stats.rules:
                cat_stats.rules.append(d.rule)

            file_diagnostics.append(
                FileDiagnostic(
                    rule=d.rule,
                    category=category,
                    message=d.message,
                    line=d.line,
                    severity=d.severity,
                    weight=d.weight,
                )
            )

        file_results.append(
            FileResult(
                file=score.file,
                score=score.total,
                lines=line_count,
                score_per_100_lines=_round1(per_100),
                diagnostics=file_diagnostics,
            )
        )

    # Worst offenders first.
    file_results.sort(key=lambda f: f.score, reverse=True)

    return Report(
        version=VERSION,
        timestamp=timestamp,
        duration_ms=_duration_ms(duration),
        git=git,
        summary=Summary(
            files_scanned=files_scanned,
            files_with_findings=files_with_findings,
            total_score=_round1(total_score),
            total_diagnostics=total_diagnostics,
            by_severity=by_severity,
            by_rule=dict(sorted(by_rule.items())),
            by_category=dict(sorted(by_category.items())),
        ),
        files=file_results,
    )