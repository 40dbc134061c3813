"""Shared fixtures: a throwaway frontend project with catalogs and sources."""

import json
from pathlib import Path

import pytest

from i18n_tools.catalog import load_catalog
from i18n_tools.config import I18nConfig

CATALOGS = {
    ('zh', 'common'): {
        'save': '保存',
        'cancel': '取消',
        'errors': {'crash': {'title': '崩溃'}},
        'tags': ['一', '二'],
    },
    ('en', 'common'): {
        'cancel': 'Cancel',
        'errors': {'crash': {'title': 'Crash'}},
        'tags': ['one', 'two'],
        'extra': 'Extra',
    },
    ('zh', 'modal'): {
        'templates': {'title': '模板'},
        'old': '旧',
    },
    ('en', 'modal'): {
        'templates': {'title': 'Templates'},
        'old': 'Old',
    },
}

SOURCES = {
    'App.tsx': (
        'import { useTranslation } from "react-i18next";\n'
        '\n'
        'function App() {\n'
        '  const { t } = useTranslation();\n'
        '  return <button title={t("common:save")}>{t(\'cancel\')}</button>;\n'
        '}\n'
    ),
    'pages/Templates.tsx': (
        'const title = t("modal:templates.title");\n'
        'const label = "Please confirm your email";\n'
    ),
    # Excluded by the default patterns
    'App.test.tsx': 't("common:errors.crash.title");\n',
    'node_modules/lib/index.js': 't("modal:old");\n',
    'styles.css': '.x { content: "t(\'common:tags\')"; }\n',
}


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding='utf-8')


@pytest.fixture
def project(tmp_path):
    """Create locales and sources under tmp_path and return its root."""
    locales = tmp_path / 'src' / 'locales'
    for (language, namespace), tree in CATALOGS.items():
        write_json(locales / language / f'{namespace}.json', tree)

    src = tmp_path / 'src'
    for relative, content in SOURCES.items():
        path = src / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')

    return tmp_path


@pytest.fixture
def config(project):
    return I18nConfig(
        locales_dir=project / 'src' / 'locales',
        src_dir=project / 'src',
        languages=['zh', 'en'],
        namespaces=['common', 'modal'],
        output_file=str(project / 'report.md'),
    )


@pytest.fixture
def catalog(config):
    return load_catalog(config)


@pytest.fixture
def references():
    """The references the fixture sources contain."""
    return {'common:save', 'cancel', 'modal:templates.title'}
