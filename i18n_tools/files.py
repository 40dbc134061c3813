"""
Source file enumeration.

Patterns are glob-style and relative to the scanned root: ``*`` and ``?`` stay
within one path segment, ``**/`` spans any number of directories (including
none) and ``{a,b}`` expands to alternatives.
"""

import re
from pathlib import Path
from typing import List, Optional, Sequence

from .console import warn

BRACE_PATTERN = re.compile(r'\{([^{}]*)\}')


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` groups, e.g. ``*.{ts,tsx}`` -> ``['*.ts', '*.tsx']``."""
    match = BRACE_PATTERN.search(pattern)
    if not match:
        return [pattern]

    expanded = []
    head, tail = pattern[:match.start()], pattern[match.end():]
    for option in match.group(1).split(','):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def glob_to_regex(pattern: str) -> re.Pattern:
    """Translate a single (brace-free) glob into an anchored regex over posix paths."""
    parts = []
    i = 0
    while i < len(pattern):
        if pattern.startswith('**/', i):
            parts.append('(?:.*/)?')
            i += 3
        elif pattern.startswith('**', i):
            parts.append('.*')
            i += 2
        elif pattern[i] == '*':
            parts.append('[^/]*')
            i += 1
        elif pattern[i] == '?':
            parts.append('[^/]')
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile('^' + ''.join(parts) + '$')


def compile_patterns(patterns: Sequence[str]) -> List[re.Pattern]:
    return [glob_to_regex(expanded) for pattern in patterns for expanded in expand_braces(pattern)]


def matches_any(relative_path: str, compiled: Sequence[re.Pattern]) -> bool:
    return any(regex.match(relative_path) for regex in compiled)


def find_source_files(root: Path, include: Sequence[str], exclude: Sequence[str]) -> List[Path]:
    """
    Return the files under ``root`` matching an include pattern and no exclude
    pattern, sorted by path.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {root}")

    included = compile_patterns(include)
    excluded = compile_patterns(exclude)

    files = []
    for path in root.rglob('*'):
        if not path.is_file():
            continue
        relative = path.relative_to(root).as_posix()
        if matches_any(relative, included) and not matches_any(relative, excluded):
            files.append(path)

    return sorted(files)


def read_source(path: Path) -> Optional[str]:
    """Read a source file, warning and returning None if it cannot be read."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        warn(f"Could not read file {path}: {e}")
        return None
