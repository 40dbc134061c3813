"""
Removal of unused keys from catalog files.

Each file is read, every deletion for it is applied in memory, and the file
is written once afterwards. A failure on one file is reported and the
remaining files are still processed.
"""

import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

from .catalog import parse_catalog, save_json
from .console import error, print_subheader, safe_print
from .keys import parse_reference, remove_at_path
from .reconcile import UNUSED, Finding


@dataclass
class CleanupResult:
    removed: Dict[str, List[str]] = field(default_factory=dict)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def removed_count(self) -> int:
        return sum(len(keys) for keys in self.removed.values())


def group_by_file(findings: Iterable[Finding]) -> Dict[str, List[Finding]]:
    """Group unused-key findings by the catalog file they came from, keeping order."""
    grouped: Dict[str, List[Finding]] = {}
    for finding in findings:
        if finding.kind != UNUSED or not finding.file:
            continue
        grouped.setdefault(finding.file, []).append(finding)
    return grouped


def backup_file(path: Path) -> Path:
    timestamp = time.strftime('%Y%m%d-%H%M%S')
    backup_path = path.with_suffix(f'.backup-{timestamp}.json')
    shutil.copy(path, backup_path)
    return backup_path


def cleanup_file(path: Path, findings: List[Finding], backup: bool = False) -> List[str]:
    """
    Remove the keys named by ``findings`` from one catalog file.

    Returns the qualified keys that were actually removed. The file is only
    rewritten when at least one key was removed.
    """
    path = Path(path)
    translations = parse_catalog(path)

    removed = []
    for finding in findings:
        _, key = parse_reference(finding.key)
        if remove_at_path(translations, key):
            removed.append(finding.key)
            safe_print(f"  Removed unused key: {finding.key}")

    if removed:
        if backup and path.exists():
            backup_path = backup_file(path)
            print(f"  Backup created: {backup_path}")
        save_json(path, translations)
        print(f"  Updated file: {path}")

    return removed


def cleanup_unused_keys(findings: Iterable[Finding], dry_run: bool = True,
                        backup: bool = False) -> CleanupResult:
    """Delete unused keys file by file. Dry runs only report what would change."""
    result = CleanupResult()
    grouped = group_by_file(findings)

    if dry_run:
        total = sum(len(items) for items in grouped.values())
        print(f"\n[DRY RUN] Would remove {total} unused keys from {len(grouped)} files")
        return result

    print_subheader("Removing unused keys")

    for file, file_findings in grouped.items():
        try:
            removed = cleanup_file(Path(file), file_findings, backup=backup)
        except (OSError, ValueError) as e:
            error(f"Failed to clean up {file}: {e}")
            result.failed[file] = str(e)
            continue
        if removed:
            result.removed[file] = removed

    print(f"\nRemoved: {result.removed_count} keys from {len(result.removed)} files")
    if result.failed:
        print(f"Failed: {len(result.failed)} files")

    return result
