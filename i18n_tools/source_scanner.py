"""
Translation key extraction.

Keys are found lexically: the first quoted argument of a ``t(`` call. Keys
assembled at runtime (concatenation, interpolation, variables) are not
visible to this scan.
"""

import re
from pathlib import Path
from typing import Iterable, Set

from .config import TRANSLATION_CALL, I18nConfig
from .files import find_source_files, read_source

# t('ns:key'), t("key"), i18n.t(`key`) but not split(':') or getT('x')
KEY_CALL_PATTERN = re.compile(
    r"(?<![\w$])" + re.escape(TRANSLATION_CALL) + r"""\((['"`])([^'"`]+)\1"""
)


def extract_references(content: str) -> Set[str]:
    """Return the distinct key references in a chunk of source text."""
    references = set()
    for match in KEY_CALL_PATTERN.finditer(content):
        key = match.group(2)
        # Template interpolation makes the key dynamic
        if '${' in key:
            continue
        references.add(key)
    return references


def scan_files_for_references(files: Iterable[Path], verbose: bool = False) -> Set[str]:
    references: Set[str] = set()
    for path in files:
        content = read_source(path)
        if content is None:
            continue
        found = extract_references(content)
        if verbose and found:
            print(f"  {path}: {len(found)} keys")
        references.update(found)
    return references


def scan_references(config: I18nConfig) -> Set[str]:
    """Scan the configured source tree and collect every referenced key."""
    files = find_source_files(config.src_dir, config.include_patterns, config.key_exclude_patterns)
    if config.verbose:
        print(f"Scanning {len(files)} files for translation keys...")
    return scan_files_for_references(files, verbose=config.verbose)
