"""
I18n Unused Keys

Finds translation keys that no source file references and optionally
removes them from the catalog files. Runs as a dry run unless --execute
is given.

Usage:
    python scripts/i18n-unused-keys.py                    # Preview only
    python scripts/i18n-unused-keys.py --execute          # Delete unused keys
    python scripts/i18n-unused-keys.py --execute --backup # Keep a copy of each file
    python scripts/i18n-unused-keys.py --output report.md
"""

import argparse
from typing import List, Optional

from .catalog import load_catalog, require_locales_dir
from .cleanup import cleanup_unused_keys
from .config import I18nConfig, add_common_arguments
from .console import error, print_banner, print_sample
from .reconcile import Finding, find_unused_keys
from .report import render_unused_report, save_report
from .source_scanner import scan_references


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Find and clean up unused translation keys',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/i18n-unused-keys.py                    # Preview mode
  python scripts/i18n-unused-keys.py --execute          # Actually delete keys
  python scripts/i18n-unused-keys.py --output report.md # Save report
        """
    )
    add_common_arguments(parser)
    parser.add_argument('--execute', action='store_true',
                        help='Delete unused keys (default: preview only)')
    parser.add_argument('--backup', action='store_true',
                        help='Copy each catalog file before rewriting it')
    return parser.parse_args(argv)


def find_unused(config: I18nConfig) -> List[Finding]:
    require_locales_dir(config.locales_dir)

    print("Loading translation files...")
    catalog = load_catalog(config)

    print("Scanning source for translation keys...")
    references = scan_references(config)

    print("Looking for unused keys...")
    return find_unused_keys(catalog, references)


def run(config: I18nConfig) -> int:
    print_banner("I18n Unused Keys")
    print(f"Locales: {config.locales_dir}")
    print(f"Source: {config.src_dir}")
    print(f"Dry run: {config.dry_run}")

    unused = find_unused(config)

    if not unused:
        print("\nNo unused translation keys found!")
    else:
        print(f"\nFound {len(unused)} unused keys:")
        print_sample(sorted({finding.key for finding in unused}))

    save_report(render_unused_report(unused), config.output_file, 'unused-keys')

    if not unused:
        return 0

    if config.dry_run:
        cleanup_unused_keys(unused, dry_run=True)
        print("\nThis is a preview. Use --execute to delete the keys.")
        return 0

    result = cleanup_unused_keys(unused, dry_run=False, backup=config.backup)
    print("\nCleanup complete!")
    return 1 if result.failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(I18nConfig.from_args(args))
    except Exception as e:
        error(f"Cleanup failed: {e}")
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
