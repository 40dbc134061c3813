"""
I18n Scanner

Scans source files for hardcoded text that is not yet translated.

Usage:
    python scripts/i18n-scanner.py
    python scripts/i18n-scanner.py --min-length 5 --output scan-report.md
"""

import argparse
from typing import Dict, List, Optional

from .config import DEFAULT_MIN_LENGTH, I18nConfig, add_common_arguments, positive_int
from .console import error, print_banner
from .literal_scanner import ScanResult, scan_literals
from .report import render_scan_report, save_report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Scan source files for hardcoded, untranslated text',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/i18n-scanner.py
  python scripts/i18n-scanner.py --min-length 5 --output scan-report.md
        """
    )
    add_common_arguments(parser)
    parser.add_argument('--min-length', type=positive_int, default=DEFAULT_MIN_LENGTH,
                        help=f'Minimum text length to report (default: {DEFAULT_MIN_LENGTH})')
    return parser.parse_args(argv)


def count_by_type(results: List[ScanResult]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for result in results:
        counts[result.type] = counts.get(result.type, 0) + 1
    return counts


def run(config: I18nConfig) -> int:
    print_banner("I18n Scanner")
    print(f"Source: {config.src_dir}")
    print(f"Minimum length: {config.min_length}")

    results = scan_literals(config)
    print(f"\nScan complete! Found {len(results)} texts that may need translation")

    save_report(render_scan_report(results), config.output_file, 'scan')

    if results:
        print("\nBy type:")
        for literal_type, count in count_by_type(results).items():
            print(f"  {literal_type}: {count}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(I18nConfig.from_args(args))
    except Exception as e:
        error(f"Scan failed: {e}")
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
