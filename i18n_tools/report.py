"""
Markdown reports for the i18n tools.

Renderers are pure: given the same results and ``generated_at`` they return
the same text. ``save_report`` writes the document to disk.
"""

import re
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TypeVar

from .literal_scanner import ScanResult
from .reconcile import ERROR, FINDING_KINDS, INCONSISTENT, MISSING, UNUSED, CoverageStats, Finding

T = TypeVar('T')

LOW_COVERAGE = 50
MEDIUM_COVERAGE = 80

KIND_TITLES = {
    MISSING: 'Missing translations',
    UNUSED: 'Unused keys',
    INCONSISTENT: 'Inconsistent keys',
    ERROR: 'Errors',
}


def timestamp() -> str:
    return time.strftime('%Y-%m-%d %H:%M:%S')


def default_report_name(tool: str) -> str:
    return f"i18n-{tool}-report-{time.strftime('%Y%m%d-%H%M%S')}.md"


def code_span(text: str) -> str:
    """Wrap text in a Markdown code span whose fence is longer than any backtick run inside it."""
    longest = max((len(run) for run in re.findall(r'`+', text)), default=0)
    fence = '`' * (longest + 1)
    if text.startswith('`') or text.endswith('`'):
        text = f" {text} "
    return f"{fence}{text}{fence}"


def group_by(items: Iterable[T], attribute: str) -> Dict[str, List[T]]:
    """Group items by an attribute, keeping first-seen order of groups and items."""
    grouped: Dict[str, List[T]] = {}
    for item in items:
        grouped.setdefault(getattr(item, attribute), []).append(item)
    return grouped


def render_scan_report(results: List[ScanResult], generated_at: Optional[str] = None) -> str:
    report = ['# i18n Scan Report']
    report.append(f"\nScanned at: {generated_at or timestamp()}")
    report.append(f"Found {len(results)} texts that may need translation\n")

    for file, file_results in group_by(results, 'file').items():
        report.append(f"## {file}")
        report.append(f"Found {len(file_results)} texts\n")

        for result in file_results:
            report.append(f"**Line {result.line}** ({result.type})")
            report.append(code_span(result.context))
            report.append(f"Text: \"{result.text}\"\n")

    return '\n'.join(report)


def coverage_advice(coverage: float) -> str:
    if coverage < LOW_COVERAGE:
        return '- Coverage is low, prioritize translating commonly used components'
    if coverage < MEDIUM_COVERAGE:
        return '- Coverage is moderate, keep filling in translations'
    return '- Coverage is good, keep maintaining translations regularly'


def render_stats_report(stats: CoverageStats, load_errors: Optional[List[Finding]] = None,
                        generated_at: Optional[str] = None) -> str:
    report = ['# i18n Statistics Report']
    report.append(f"\nGenerated at: {generated_at or timestamp()}\n")

    report.append('## Overview')
    report.append(f"- **Total keys**: {stats.total_keys}")
    report.append(f"- **Used**: {stats.used_keys}")
    report.append(f"- **Unused**: {stats.unused_keys}")
    report.append(f"- **Missing translations**: {stats.missing_translations}")
    report.append(f"- **Distinct references in source**: {stats.references}")
    report.append(f"- **Coverage**: {stats.coverage:.1f}%\n")

    report.append('## By namespace')
    report.append('| Namespace | Total | Used | Unused | Missing | Coverage |')
    report.append('|-----------|-------|------|--------|---------|----------|')
    for namespace, ns_stats in stats.by_namespace.items():
        report.append(
            f"| {namespace} | {ns_stats.total} | {ns_stats.used} | {ns_stats.unused} "
            f"| {ns_stats.missing} | {ns_stats.coverage:.1f}% |"
        )
    report.append('')

    report.append('## By language')
    report.append('| Language | Total | Used | Missing | Coverage |')
    report.append('|----------|-------|------|---------|----------|')
    for language, lang_stats in stats.by_language.items():
        report.append(
            f"| {language} | {lang_stats.total} | {lang_stats.used} "
            f"| {lang_stats.missing} | {lang_stats.coverage:.1f}% |"
        )
    report.append('')

    if load_errors:
        report.append(f"## Load errors ({len(load_errors)})")
        for finding in load_errors:
            report.append(f"- {finding.message}")
        report.append('')

    report.append('## Recommendations')
    report.append(coverage_advice(stats.coverage))

    if stats.unused_keys > 0:
        report.append(f"- Found {stats.unused_keys} unused translation keys, consider cleaning them up")

    languages_with_missing = [
        language for language, lang_stats in stats.by_language.items() if lang_stats.missing > 0
    ]
    if languages_with_missing:
        report.append(f"- These languages have missing translations: {', '.join(languages_with_missing)}")

    return '\n'.join(report)


def render_unused_report(findings: List[Finding], generated_at: Optional[str] = None) -> str:
    report = ['# i18n Unused Keys Report']
    report.append(f"\nGenerated at: {generated_at or timestamp()}")
    report.append(f"Found {len(findings)} unused keys\n")

    if not findings:
        report.append('No unused translation keys found!')
        return '\n'.join(report)

    report.append('## By file')
    for file, file_findings in group_by(findings, 'file').items():
        report.append(f"### {file}")
        report.append(f"{len(file_findings)} unused keys:\n")
        for finding in file_findings:
            report.append(f"- `{finding.key}`")
        report.append('')

    report.append('## By namespace')
    report.append('| Namespace | Unused keys |')
    report.append('|-----------|-------------|')
    for namespace, ns_findings in group_by(findings, 'namespace').items():
        report.append(f"| {namespace} | {len(ns_findings)} |")
    report.append('')

    report.append('## Recommendations')
    report.append('- Confirm these keys are really unused before deleting them')
    report.append('- Keys built dynamically at runtime are not detected by the scan')
    report.append('- Preview with the default dry run, then delete with `--execute`')
    report.append('- Run the test suite after deleting keys')

    return '\n'.join(report)


def render_validation_report(findings: List[Finding], generated_at: Optional[str] = None) -> str:
    report = ['# i18n Validation Report']
    report.append(f"\nValidated at: {generated_at or timestamp()}")
    report.append(f"Found {len(findings)} issues\n")

    grouped = group_by(findings, 'kind')
    for kind in FINDING_KINDS:
        kind_findings = grouped.get(kind)
        if not kind_findings:
            continue
        report.append(f"## {KIND_TITLES[kind]} ({len(kind_findings)})")
        for finding in kind_findings:
            report.append(f"- **{finding.namespace}**: {finding.message}")
        report.append('')

    return '\n'.join(report)


def save_report(content: str, output_file: Optional[str], tool: str) -> Path:
    """Write a report to ``output_file`` or a timestamped default name."""
    path = Path(output_file or default_report_name(tool))
    if path.parent != Path('.'):
        path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    print(f"Report saved to: {path}")
    return path
