# lipstyk

lipstyk is a set of rules that look for patterns common in machine-generated output. It covers Python code, Markdown documents and plain prose. The Python checks include broad `except` blocks, `range(len(x))` loops, mutable default arguments and leftover `print()` calls. The document checks look for buzzword density, placeholder text and template-like structure. Each finding has a severity and a weight. Findings for a file can be combined into a score, and scores for several files can be combined into a report.

## Install

```
pip install .
```

## Rules

Every rule is a class. Its `check` method takes the text and returns a list of `Diagnostic` objects. A `Diagnostic` has the fields `rule`, `message`, `line`, `severity` and `weight`. `severity` is a `Severity` member: `HINT`, `WARNING` or `SLOP`.

| Module | Class | Rule name |
|--------|-------|-----------|
| `lipstyk.python_errors` | `BareExcept` | `bare-except` |
| `lipstyk.python_errors` | `ErrorHandling` | `py-error-handling` |
| `lipstyk.python_style` | `ImportStar` | `import-star` |
| `lipstyk.python_style` | `IndexLoop` | `py-index-loop` |
| `lipstyk.python_style` | `MutableDefault` | `py-mutable-default` |
| `lipstyk.python_style` | `PrintDebug` | `print-debug` |
| `lipstyk.python_style` | `TypeHintGaps` | `type-hint-gaps` |
| `lipstyk.markdown_rules` | `Placeholders` | `md-placeholder` |
| `lipstyk.markdown_rules` | `SlopPhrases` | `md-slop-phrases` |
| `lipstyk.markdown_rules` | `Structure` | `md-structure` |
| `lipstyk.prose` | `ProseSlopPhrases` | `prose-slop-phrases` |
| `lipstyk.prose` | `ProseStructure` | `prose-structure` |

```python
from lipstyk.python_errors import BareExcept
from lipstyk.python_style import IndexLoop, MutableDefault

with open("module.py") as fh:
    source = fh.read()

for rule in (BareExcept(), IndexLoop(), MutableDefault()):
    for d in rule.check(source):
        print(d.line, d.severity.value, d.rule, d.message)
```

The prose rules also take the language of the text, either `"markdown"` or `"text"`. The default is `"text"`. For plain text, `ProseSlopPhrases` reports once it finds two phrases. For Markdown it needs three.

```python
from lipstyk.prose import ProseSlopPhrases

ProseSlopPhrases().check(text, "text")
```

## Scores and reports

`SlopScore.from_diagnostics(file, diagnostics)` collects one file's findings. Its total is the sum of their weights.

`build_report(scores, files_scanned, sources, duration, git)` combines scores into a `Report`. The arguments are:

- `sources` maps each file name to its text and is used to count lines.
- `duration` is a `timedelta` or a number of seconds.
- `git` is a `GitInfo` or `None`.

In the report, files are ordered worst first. The summary counts findings by severity, by rule and by category. `rule_category(rule)` gives a rule's category, and returns `"other"` for unknown rules. `Report.to_dict()` returns the report as a JSON-ready mapping.

```python
import json
from datetime import timedelta
from lipstyk.report import SlopScore, build_report

scores = [SlopScore.from_diagnostics("module.py", diagnostics)]
report = build_report(scores, 1, {"module.py": source}, timedelta(0), None)
print(json.dumps(report.to_dict(), indent=2))
```

## What this package does not do

lipstyk is a library only. It has no:

- command-line program
- directory walking or configuration files
- Markdown or SARIF rendering of reports

It also has no rules for languages other than Python, Markdown and plain text. To scan a project, read the files yourself, run the rules you want, and pass the results to `build_report`.

A finding shows that a text is dense with slop patterns. It does not prove who or what wrote the text.