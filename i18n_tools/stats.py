"""
I18n Statistics

Reports translation key usage and coverage per namespace and per language.

Usage:
    python scripts/i18n-stats.py
    python scripts/i18n-stats.py --output stats-report.md
    python scripts/i18n-stats.py --languages en,zh --namespaces common,auth
"""

import argparse
from typing import List, Optional

from .catalog import load_catalog, require_locales_dir
from .config import I18nConfig, add_common_arguments
from .console import error, print_banner
from .reconcile import CoverageStats, compute_coverage
from .report import render_stats_report, save_report
from .source_scanner import scan_references


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Generate an i18n translation coverage report',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/i18n-stats.py
  python scripts/i18n-stats.py --output stats-report.md
        """
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def generate_stats(config: I18nConfig):
    """Load catalogs, scan references and compute coverage."""
    require_locales_dir(config.locales_dir)

    print("Loading translation files...")
    catalog = load_catalog(config)

    print("Scanning source for translation keys...")
    references = scan_references(config)

    print("Computing statistics...")
    return compute_coverage(catalog, references, config.default_namespace), catalog


def print_summary(stats: CoverageStats) -> None:
    print("\nStatistics complete!")
    print(f"Overall coverage: {stats.coverage:.1f}%")
    print(f"Total keys: {stats.total_keys}")
    print(f"Used: {stats.used_keys}")
    print(f"Unused: {stats.unused_keys}")


def run(config: I18nConfig) -> int:
    print_banner("I18n Statistics")
    print(f"Locales: {config.locales_dir}")
    print(f"Source: {config.src_dir}")
    print(f"Languages: {', '.join(config.languages)}")

    stats, catalog = generate_stats(config)
    print_summary(stats)

    report = render_stats_report(stats, catalog.errors)
    save_report(report, config.output_file, 'stats')
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(I18nConfig.from_args(args))
    except Exception as e:
        error(f"Statistics failed: {e}")
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
