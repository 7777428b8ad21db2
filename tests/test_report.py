import json
from datetime import timedelta

import pytest

from lipstyk.report import (
    Diagnostic,
    GitInfo,
    Severity,
    SlopScore,
    build_report,
    rule_category,
)


def _diag(rule, severity=Severity.WARNING, weight=1.5, line=1, message="msg"):
    return Diagnostic(rule=rule, message=message, line=line, severity=severity, weight=weight)


def _sample():
    light = SlopScore.from_diagnostics("a.py", [_diag("bare-except", Severity.HINT, 0.75)])
    heavy = SlopScore.from_diagnostics(
        "b.py",
        [
            _diag("bare-except", Severity.SLOP, 2.5),
            _diag("py-error-handling", Severity.WARNING, 1.5),
            _diag("print-debug", Severity.WARNING, 1.5),
        ],
    )
    clean = SlopScore.from_diagnostics("c.py", [])
    sources = {"a.py": "x\n" * 10, "b.py": "y\n" * 100, "c.py": "z\n"}
    return [light, heavy, clean], sources


def test_rule_category_known_and_unknown():
    assert rule_category("unwrap-overuse") == "error-handling"
    assert rule_category("md-placeholder") == "documentation"
    assert rule_category("no-such-rule") == "other"


@pytest.mark.parametrize(
    ("name", "category"),
    [
        ("redundant-clone", "ownership"),
        ("verbose-match", "idiom"),
        ("generic-naming", "naming"),
        ("trivial-wrapper", "structure"),
        ("whitespace-uniformity", "statistical"),
        ("div-soup", "html-structure"),
        ("inline-styles", "css"),
        ("accessibility", "accessibility"),
        ("any-abuse", "ts-quality"),
        ("print-debug", "debug-output"),
        ("nested-ternary", "ts-idiom"),
        ("py-mutable-default", "py-quality"),
        ("import-star", "py-structure"),
        ("cross-file-duplicate", "cross-file"),
        ("sh-strict-mode", "shell"),
        ("docker-best-practices", "docker"),
        ("k8s-manifest", "kubernetes"),
        ("ci-workflow", "ci-cd"),
        ("go-antipattern", "go-quality"),
        ("prose-structure", "documentation"),
    ],
)
def test_registered_rules_map_to_their_category(name, category):
    assert rule_category(name) == category


def test_from_diagnostics_sums_weights():
    diags = [_diag("a", weight=0.75), _diag("b", weight=2.5)]
    score = SlopScore.from_diagnostics("f.py", diags)
    assert score.total == sum(d.weight for d in diags)
    assert score.diagnostics == diags
    assert score.file == "f.py"


def test_build_counts_and_ordering():
    scores, sources = _sample()
    report = build_report(scores, 3, sources, timedelta(milliseconds=1500), None)
    summary = report.summary
    assert summary.files_scanned == 3
    assert summary.files_with_findings == 2
    assert summary.total_diagnostics == sum(len(s.diagnostics) for s in scores)
    assert [f.score for f in report.files] == sorted(
        (f.score for f in report.files), reverse=True
    )
    assert report.files[0].file == "b.py"
    assert report.duration_ms == 1500


def test_build_severity_and_rule_stats():
    scores, sources = _sample()
    report = build_report(scores, 3, sources, 0, None)
    counts = report.summary.by_severity
    all_diags = [d for s in scores for d in s.diagnostics]
    assert counts.hint == sum(d.severity is Severity.HINT for d in all_diags)
    assert counts.warning == sum(d.severity is Severity.WARNING for d in all_diags)
    assert counts.slop == sum(d.severity is Severity.SLOP for d in all_diags)
    bare = report.summary.by_rule["bare-except"]
    assert bare.count == 2
    assert bare.total_weight == 0.75 + 2.5
    assert list(report.summary.by_rule) == sorted(report.summary.by_rule)


def test_build_category_rules_are_deduplicated():
    scores, sources = _sample()
    report = build_report(scores, 3, sources, 0, None)
    handling = report.summary.by_category["error-handling"]
    assert handling.rules == ["bare-except", "py-error-handling"]
    assert handling.count == 3
    assert report.summary.by_category["debug-output"].rules == ["print-debug"]


def test_lines_and_score_per_100():
    scores, sources = _sample()
    report = build_report(scores, 3, sources, 0, None)
    by_file = {f.file: f for f in report.files}
    assert by_file["b.py"].lines == 100
    assert by_file["b.py"].score_per_100_lines == by_file["b.py"].score
    assert by_file["c.py"].lines == 1
    assert by_file["b.py"].diagnostics[0].category == "error-handling"


def test_missing_source_gives_zero_lines():
    score = SlopScore.from_diagnostics("gone.py", [_diag("print-debug")])
    report = build_report([score], 1, {}, 0, None)
    assert report.files[0].lines == 0
    assert report.files[0].score_per_100_lines == 0.0


def test_to_dict_omits_git_when_absent_and_is_json():
    scores, sources = _sample()
    report = build_report(scores, 3, sources, 0, None)
    data = json.loads(json.dumps(report.to_dict()))
    assert "git" not in data
    assert data["summary"]["files_scanned"] == 3
    assert data["version"] == report.version
    first = data["files"][0]["diagnostics"][0]
    assert first["severity"] == Severity.SLOP.value
    assert first["rule"] == "bare-except"


def test_to_dict_includes_git():
    git = GitInfo(branch="main", commit="abc1234", dirty=True)
    report = build_report([], 0, {}, 0, git)
    data = report.to_dict()
    assert data["git"] == {"branch": "main", "commit": "abc1234", "dirty": True}
    assert data["files"] == []