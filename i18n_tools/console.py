"""Console helpers shared by the i18n tools."""

from typing import Iterable, List


def safe_print(text: str) -> None:
    """Print text safely, handling Unicode encoding errors on Windows."""
    try:
        print(text)
    except UnicodeEncodeError:
        safe_text = text.encode('ascii', 'replace').decode('ascii')
        print(safe_text)


def print_banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def print_subheader(title: str) -> None:
    print(f"\n{title}")
    print("-" * len(title))


def warn(message: str) -> None:
    safe_print(f"Warning: {message}")


def error(message: str) -> None:
    safe_print(f"Error: {message}")


def shorten(text: str, limit: int = 60) -> str:
    """Truncate text for display and make newlines visible."""
    display = text[:limit] + '...' if len(text) > limit else text
    return display.replace('\n', '\\n')


def print_sample(items: Iterable[str], limit: int = 10, prefix: str = '  - ') -> None:
    """Print the first items of a listing followed by a remainder count."""
    listing: List[str] = list(items)
    for item in listing[:limit]:
        safe_print(f"{prefix}{shorten(item)}")
    if len(listing) > limit:
        print(f"  ... and {len(listing) - limit} more")
