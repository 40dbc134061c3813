"""
Reconciliation of source key references against loaded catalogs.

Each analysis is independent and returns findings (or statistics) without
touching the catalog, so the tools can compose whichever checks they need.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set

from .config import DEFAULT_NAMESPACE
from .keys import has_key, parse_reference, qualify

if TYPE_CHECKING:
    from .catalog import Catalog

# Finding kinds
MISSING = 'missing'
UNUSED = 'unused'
INCONSISTENT = 'inconsistent'
ERROR = 'error'

FINDING_KINDS = [MISSING, UNUSED, INCONSISTENT, ERROR]

# Consistency tags, relative to the reference language
TAG_MISSING = 'missing'
TAG_EXTRA = 'extra'


@dataclass(frozen=True)
class Finding:
    kind: str
    namespace: str
    key: str
    message: str
    language: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None
    tag: Optional[str] = None


@dataclass
class KeyStats:
    total: int = 0
    used: int = 0
    unused: int = 0
    missing: int = 0

    @property
    def coverage(self) -> float:
        return coverage_percent(self.used, self.total)


@dataclass
class CoverageStats:
    total_keys: int = 0
    used_keys: int = 0
    unused_keys: int = 0
    missing_translations: int = 0
    references: int = 0
    by_namespace: Dict[str, KeyStats] = field(default_factory=dict)
    by_language: Dict[str, KeyStats] = field(default_factory=dict)

    @property
    def coverage(self) -> float:
        return coverage_percent(self.used_keys, self.total_keys)


def coverage_percent(used: int, total: int) -> float:
    if total == 0:
        return 0.0
    return used / total * 100


def references_by_namespace(references: Iterable[str],
                            default_namespace: str = DEFAULT_NAMESPACE) -> Dict[str, Set[str]]:
    """Group references into {namespace: {dotted keys}} using the default-namespace rule."""
    grouped: Dict[str, Set[str]] = {}
    for reference in references:
        namespace, key = parse_reference(reference, default_namespace)
        grouped.setdefault(namespace, set()).add(key)
    return grouped


def check_completeness(catalog: 'Catalog', references: Iterable[str],
                       default_namespace: str = DEFAULT_NAMESPACE) -> List[Finding]:
    """Report every referenced key that a configured language does not define."""
    grouped = references_by_namespace(references, default_namespace)
    findings = []

    for language in catalog.languages:
        for namespace in catalog.namespaces:
            tree = catalog.tree(language, namespace)
            for key in sorted(grouped.get(namespace, ())):
                if has_key(tree, key):
                    continue
                full_key = qualify(namespace, key)
                findings.append(Finding(
                    kind=MISSING,
                    namespace=namespace,
                    key=full_key,
                    message=f"Missing {language} translation: {full_key}",
                    language=language,
                    file=str(catalog.path(language, namespace)),
                ))

    return findings


def check_consistency(catalog: 'Catalog') -> List[Finding]:
    """
    Compare every language against the first configured language.

    Keys the reference has but a language lacks are tagged ``missing``; keys a
    language has beyond the reference are tagged ``extra``.
    """
    if not catalog.languages:
        return []

    reference_language = catalog.languages[0]
    reference_keys = catalog.qualified_keys(reference_language)
    findings = []

    for language in catalog.languages[1:]:
        language_keys = catalog.qualified_keys(language)

        for full_key in sorted(reference_keys - language_keys):
            findings.append(Finding(
                kind=INCONSISTENT,
                namespace=parse_reference(full_key)[0],
                key=full_key,
                message=f"{language} is missing key: {full_key}",
                language=language,
                tag=TAG_MISSING,
            ))

        for full_key in sorted(language_keys - reference_keys):
            findings.append(Finding(
                kind=INCONSISTENT,
                namespace=parse_reference(full_key)[0],
                key=full_key,
                message=f"{language} has extra key: {full_key}",
                language=language,
                tag=TAG_EXTRA,
            ))

    return findings


def is_used(namespace: str, key: str, references: Set[str]) -> bool:
    """A catalog key counts as used if either its bare or qualified form is referenced."""
    return key in references or qualify(namespace, key) in references


def find_unused_keys(catalog: 'Catalog', references: Iterable[str]) -> List[Finding]:
    """Report every catalog leaf that no reference points at."""
    reference_set = set(references)
    findings = []

    for language in catalog.languages:
        for namespace in catalog.namespaces:
            path = str(catalog.path(language, namespace))
            for key in catalog.keys(language, namespace):
                if is_used(namespace, key, reference_set):
                    continue
                full_key = qualify(namespace, key)
                findings.append(Finding(
                    kind=UNUSED,
                    namespace=namespace,
                    key=full_key,
                    message=f"Unused translation key: {full_key}",
                    language=language,
                    file=path,
                ))

    return findings


def compute_coverage(catalog: 'Catalog', references: Iterable[str],
                     default_namespace: str = DEFAULT_NAMESPACE) -> CoverageStats:
    """Aggregate usage and missing counts per namespace and per language."""
    reference_set = set(references)
    grouped = references_by_namespace(reference_set, default_namespace)
    stats = CoverageStats(references=len(reference_set))

    for namespace in catalog.namespaces:
        all_keys = catalog.namespace_keys(namespace)
        referenced = grouped.get(namespace, set())

        ns_stats = KeyStats(total=len(all_keys))
        ns_stats.used = len(all_keys & referenced)
        ns_stats.unused = ns_stats.total - ns_stats.used
        for language in catalog.languages:
            tree = catalog.tree(language, namespace)
            ns_stats.missing += sum(1 for key in referenced if not has_key(tree, key))

        stats.by_namespace[namespace] = ns_stats
        stats.total_keys += ns_stats.total
        stats.used_keys += ns_stats.used
        stats.missing_translations += ns_stats.missing

    for language in catalog.languages:
        lang_stats = KeyStats()
        for namespace in catalog.namespaces:
            keys = set(catalog.keys(language, namespace))
            referenced = grouped.get(namespace, set())
            tree = catalog.tree(language, namespace)

            lang_stats.total += len(keys)
            lang_stats.used += len(keys & referenced)
            lang_stats.missing += sum(1 for key in referenced if not has_key(tree, key))
        lang_stats.unused = lang_stats.total - lang_stats.used
        stats.by_language[language] = lang_stats

    stats.unused_keys = stats.total_keys - stats.used_keys
    return stats


def count_by_kind(findings: Iterable[Finding]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for finding in findings:
        counts[finding.kind] = counts.get(finding.kind, 0) + 1
    return counts


def has_blocking_findings(findings: Iterable[Finding]) -> bool:
    """Missing translations and load errors fail a validation run."""
    return any(finding.kind in (MISSING, ERROR) for finding in findings)
