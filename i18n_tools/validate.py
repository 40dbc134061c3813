"""
I18n Validator

Checks that every referenced key is translated in every language, that all
languages define the same keys as the first (reference) language, and lists
unused keys. Exits with 1 when translations are missing or a catalog failed
to load, so it can gate CI.

Usage:
    python scripts/i18n-validator.py
    python scripts/i18n-validator.py --output validation-report.md
"""

import argparse
from typing import List, Optional

from .catalog import load_catalog, require_locales_dir
from .config import I18nConfig, add_common_arguments
from .console import error, print_banner
from .reconcile import (
    Finding,
    check_completeness,
    check_consistency,
    count_by_kind,
    find_unused_keys,
    has_blocking_findings,
)
from .report import render_validation_report, save_report
from .source_scanner import scan_references


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Validate translation completeness and consistency',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/i18n-validator.py
  python scripts/i18n-validator.py --output validation-report.md
        """
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def validate(config: I18nConfig) -> List[Finding]:
    """Run every check and return the combined findings."""
    require_locales_dir(config.locales_dir)

    print("Loading translation files...")
    catalog = load_catalog(config)

    print("Scanning source for translation keys...")
    references = scan_references(config)

    findings = list(catalog.errors)

    print("Checking completeness...")
    findings.extend(check_completeness(catalog, references, config.default_namespace))

    print("Checking consistency...")
    findings.extend(check_consistency(catalog))

    print("Checking for unused keys...")
    findings.extend(find_unused_keys(catalog, references))

    return findings


def run(config: I18nConfig) -> int:
    print_banner("I18n Validator")
    print(f"Locales: {config.locales_dir}")
    print(f"Source: {config.src_dir}")
    print(f"Reference language: {config.reference_language}")

    findings = validate(config)

    if not findings:
        print("\nValidation passed! No issues found")
    else:
        print(f"\nValidation complete! Found {len(findings)} issues")
        print("\nBy kind:")
        for kind, count in count_by_kind(findings).items():
            print(f"  {kind}: {count}")

    save_report(render_validation_report(findings), config.output_file, 'validation')

    return 1 if has_blocking_findings(findings) else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(I18nConfig.from_args(args))
    except Exception as e:
        error(f"Validation failed: {e}")
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
