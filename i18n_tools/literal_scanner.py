"""
Hardcoded text scanner.

Finds quoted literals and markup text runs that look like user-facing copy
and are not routed through the translation function yet. This is a
line-based heuristic: it prefers reporting too much over missing text.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .config import DEFAULT_MIN_LENGTH, TRANSLATION_CALL, TRANSLATION_HOOK, I18nConfig
from .files import find_source_files, read_source

# Literal kinds
STRING = 'string'
TEMPLATE = 'template'
MARKUP = 'markup'

STRING_LITERAL_PATTERN = re.compile(r"""(['"`])((?:(?!\1)[^\\]|\\.)*)\1""")
MARKUP_TEXT_PATTERN = re.compile(r'>([^<>{}\n]+)<')

DIGITS_PATTERN = re.compile(r'^\d+$')
URL_PATTERN = re.compile(r'^https?://')
EMAIL_PATTERN = re.compile(r'^[^\s]+@[^\s]+\.[^\s]+$')
HYPHENATED_PATTERN = re.compile(r'^[a-z-]+$', re.IGNORECASE)
IDENTIFIER_PATTERN = re.compile(r'^[a-zA-Z_$][a-zA-Z0-9_$]*$')

CONTEXT_BEFORE = 20
CONTEXT_AFTER = 50


@dataclass(frozen=True)
class ScanResult:
    file: str
    line: int
    text: str
    context: str
    type: str


def should_skip_line(line: str) -> bool:
    """Comments, import/export lines and debug statements never hold UI copy."""
    trimmed = line.strip()

    if trimmed.startswith(('//', '/*', '*')):
        return True

    if trimmed.startswith(('import ', 'export ')):
        return True

    if 'console.' in trimmed or 'debugger' in trimmed:
        return True

    return False


def is_valid_text(text: str, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    """Decide whether a literal looks like human-readable text that needs translating."""
    if len(text) < min_length:
        return False

    if DIGITS_PATTERN.match(text):
        return False

    if URL_PATTERN.match(text) or EMAIL_PATTERN.match(text):
        return False

    # CSS classes, ids and similar tokens
    if HYPHENATED_PATTERN.match(text) and len(text) < 20:
        return False

    if IDENTIFIER_PATTERN.match(text):
        return False

    # Already internationalized
    if f"{TRANSLATION_CALL}(" in text or TRANSLATION_HOOK in text:
        return False

    return True


def get_context(line: str, index: int) -> str:
    start = max(0, index - CONTEXT_BEFORE)
    end = min(len(line), index + CONTEXT_AFTER)
    return line[start:end].strip()


def scan_line(line: str, file: str, line_number: int,
              min_length: int = DEFAULT_MIN_LENGTH) -> List[ScanResult]:
    """Extract candidate literals from one physical line."""
    if should_skip_line(line):
        return []

    results = []

    for match in STRING_LITERAL_PATTERN.finditer(line):
        text = match.group(2)
        if is_valid_text(text, min_length):
            results.append(ScanResult(
                file=file,
                line=line_number,
                text=text,
                context=get_context(line, match.start()),
                type=TEMPLATE if match.group(1) == '`' else STRING,
            ))

    for match in MARKUP_TEXT_PATTERN.finditer(line):
        text = match.group(1).strip()
        if is_valid_text(text, min_length):
            results.append(ScanResult(
                file=file,
                line=line_number,
                text=text,
                context=get_context(line, match.start()),
                type=MARKUP,
            ))

    return results


def scan_file(path: Path, min_length: int = DEFAULT_MIN_LENGTH) -> List[ScanResult]:
    content = read_source(path)
    if content is None:
        return []

    results = []
    for index, line in enumerate(content.split('\n')):
        results.extend(scan_line(line, str(path), index + 1, min_length))
    return results


def scan_files(files: Iterable[Path], min_length: int = DEFAULT_MIN_LENGTH,
               verbose: bool = False) -> List[ScanResult]:
    results = []
    for path in files:
        file_results = scan_file(path, min_length)
        if verbose and file_results:
            print(f"  {path}: {len(file_results)} candidates")
        results.extend(file_results)
    return results


def scan_literals(config: I18nConfig) -> List[ScanResult]:
    """Scan the configured source tree for hardcoded text."""
    files = find_source_files(config.src_dir, config.include_patterns, config.exclude_patterns)
    print(f"Scanning {len(files)} files...")
    return scan_files(files, config.min_length, config.verbose)
