"""
Translation catalog loading.

Catalogs live at ``<locales_dir>/<lang>/<namespace>.json``. A missing file is
an empty namespace; a file that fails to parse is replaced by an empty tree
and recorded as an ``error`` finding so one corrupt file never stops a run.
"""

import json
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

from .config import CATALOG_EXTENSION, I18nConfig
from .console import warn
from .keys import flatten, qualify
from .reconcile import ERROR, Finding


class CatalogParseError(ValueError):
    """A catalog file exists but is not a JSON object."""


def load_json(path: Path) -> Optional[Dict]:
    """Load a JSON file, returning None when it does not exist."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        return None


def save_json(path: Path, data: Dict) -> None:
    """
    Save JSON the way the catalogs are committed: 2-space indent, trailing newline.

    The content goes to a temporary file next to ``path`` which then replaces it,
    so an interrupted write never leaves a truncated catalog behind.
    """
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix='.tmp', dir=path.parent)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write('\n')
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def catalog_path(locales_dir: Path, language: str, namespace: str) -> Path:
    return Path(locales_dir) / language / f"{namespace}.{CATALOG_EXTENSION}"


def require_locales_dir(locales_dir: Path) -> None:
    if not Path(locales_dir).is_dir():
        raise FileNotFoundError(f"Locales directory not found: {locales_dir}")


def parse_catalog(path: Path) -> Dict[str, Any]:
    """Read one catalog file. Missing files yield an empty tree."""
    data = load_json(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogParseError(f"expected a JSON object, got {type(data).__name__}")
    return data


@dataclass
class Catalog:
    """Loaded trees keyed by (language, namespace), read-only during a run."""

    locales_dir: Path
    languages: List[str]
    namespaces: List[str]
    trees: Dict[Tuple[str, str], Dict[str, Any]] = field(default_factory=dict)
    errors: List[Finding] = field(default_factory=list)

    def tree(self, language: str, namespace: str) -> Dict[str, Any]:
        return self.trees.get((language, namespace), {})

    def path(self, language: str, namespace: str) -> Path:
        return catalog_path(self.locales_dir, language, namespace)

    def keys(self, language: str, namespace: str) -> List[str]:
        return flatten(self.tree(language, namespace))

    def namespace_keys(self, namespace: str) -> Set[str]:
        """Distinct leaf keys of a namespace across all languages."""
        keys: Set[str] = set()
        for language in self.languages:
            keys.update(self.keys(language, namespace))
        return keys

    def qualified_keys(self, language: str) -> Set[str]:
        """Every ``namespace:key`` defined for a language."""
        return {
            qualify(namespace, key)
            for namespace in self.namespaces
            for key in self.keys(language, namespace)
        }


def load_catalog(config: I18nConfig) -> Catalog:
    """Load every (language, namespace) pair named by the config."""
    catalog = Catalog(
        locales_dir=Path(config.locales_dir),
        languages=list(config.languages),
        namespaces=list(config.namespaces),
    )

    for language in config.languages:
        for namespace in config.namespaces:
            path = catalog.path(language, namespace)
            try:
                catalog.trees[(language, namespace)] = parse_catalog(path)
            except (ValueError, OSError) as e:
                warn(f"Could not load translation file {path}: {e}")
                catalog.trees[(language, namespace)] = {}
                catalog.errors.append(Finding(
                    kind=ERROR,
                    namespace=namespace,
                    key=str(path),
                    message=f"Failed to load {path}: {e}",
                    language=language,
                    file=str(path),
                ))

    return catalog
