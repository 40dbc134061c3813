"""
Shared configuration for the i18n tools.

Defaults mirror the frontend layout: one JSON file per (language, namespace)
under ``src/locales/<lang>/<namespace>.json`` and sources under ``src``.
"""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_LOCALES_DIR = 'src/locales'
DEFAULT_SRC_DIR = 'src'

# The first language is the reference for consistency checks
DEFAULT_LANGUAGES = ['zh', 'en']

DEFAULT_NAMESPACES = [
    'common',
    'auth',
    'flow',
    'modal',
    'message',
    'navigation',
    'ui',
    'validation',
    'store',
    'component',
    'page',
]

DEFAULT_NAMESPACE = 'common'
CATALOG_EXTENSION = 'json'

DEFAULT_MIN_LENGTH = 3

# Patterns are relative to the source directory
INCLUDE_PATTERNS = ['**/*.{ts,tsx,js,jsx}']
EXCLUDE_PATTERNS = [
    '**/*.test.{ts,tsx,js,jsx}',
    '**/*.spec.{ts,tsx,js,jsx}',
    '**/node_modules/**',
    '**/dist/**',
    '**/build/**',
]

# Key references are scanned everywhere except tests and vendored packages
KEY_EXCLUDE_PATTERNS = [
    '**/*.test.{ts,tsx,js,jsx}',
    '**/*.spec.{ts,tsx,js,jsx}',
    '**/node_modules/**',
]

TRANSLATION_CALL = 't'
TRANSLATION_HOOK = 'useTranslation'


@dataclass
class I18nConfig:
    """Run context handed to every component of a tool invocation."""

    locales_dir: Path = Path(DEFAULT_LOCALES_DIR)
    src_dir: Path = Path(DEFAULT_SRC_DIR)
    languages: List[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    namespaces: List[str] = field(default_factory=lambda: list(DEFAULT_NAMESPACES))
    default_namespace: str = DEFAULT_NAMESPACE
    include_patterns: List[str] = field(default_factory=lambda: list(INCLUDE_PATTERNS))
    exclude_patterns: List[str] = field(default_factory=lambda: list(EXCLUDE_PATTERNS))
    key_exclude_patterns: List[str] = field(default_factory=lambda: list(KEY_EXCLUDE_PATTERNS))
    min_length: int = DEFAULT_MIN_LENGTH
    output_file: Optional[str] = None
    dry_run: bool = True
    backup: bool = False
    verbose: bool = False

    @property
    def reference_language(self) -> str:
        return self.languages[0]

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'I18nConfig':
        """Build a config from parsed arguments, ignoring options a tool does not define."""
        config = cls(
            locales_dir=Path(args.locales_dir),
            src_dir=Path(args.src_dir),
            output_file=args.output,
            verbose=args.verbose,
        )
        if args.languages:
            config.languages = args.languages
        if args.namespaces:
            config.namespaces = args.namespaces
        if getattr(args, 'min_length', None) is not None:
            config.min_length = args.min_length
        if getattr(args, 'execute', False):
            config.dry_run = False
        config.backup = getattr(args, 'backup', False)
        return config


def split_list(value: str) -> List[str]:
    """Split a comma separated option value, dropping empty items."""
    items = [item.strip() for item in value.split(',') if item.strip()]
    if not items:
        raise argparse.ArgumentTypeError(f"expected a comma separated list, got {value!r}")
    return items


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by all four tools."""
    parser.add_argument('--locales-dir', default=DEFAULT_LOCALES_DIR,
                        help=f'Translation catalog directory (default: {DEFAULT_LOCALES_DIR})')
    parser.add_argument('--src-dir', default=DEFAULT_SRC_DIR,
                        help=f'Source directory to scan (default: {DEFAULT_SRC_DIR})')
    parser.add_argument('--output', '-o', default=None,
                        help='Report file path (default: timestamped .md file)')
    parser.add_argument('--languages', default=None, type=split_list,
                        help=f"Comma separated language codes, first is the reference "
                             f"(default: {','.join(DEFAULT_LANGUAGES)})")
    parser.add_argument('--namespaces', default=None, type=split_list,
                        help='Comma separated namespaces (default: all frontend namespaces)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
