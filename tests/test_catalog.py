"""Tests for catalog loading."""

import json

import pytest

from i18n_tools.catalog import (
    CatalogParseError,
    catalog_path,
    load_catalog,
    parse_catalog,
    require_locales_dir,
    save_json,
)
from i18n_tools.reconcile import ERROR


class TestLoadCatalog:
    """Test loading catalogs for every (language, namespace) pair."""

    def test_loads_every_pair(self, catalog):
        assert catalog.tree('zh', 'common')['save'] == '保存'
        assert catalog.tree('en', 'modal')['templates']['title'] == 'Templates'
        assert catalog.errors == []

    def test_missing_file_is_empty_without_error(self, config):
        config.namespaces = ['common', 'auth']
        catalog = load_catalog(config)
        assert catalog.tree('zh', 'auth') == {}
        assert catalog.tree('en', 'auth') == {}
        assert catalog.errors == []

    def test_malformed_file_records_one_error(self, config):
        bad = catalog_path(config.locales_dir, 'en', 'common')
        bad.write_text('{"cancel": "Cancel",', encoding='utf-8')

        catalog = load_catalog(config)

        assert catalog.tree('en', 'common') == {}
        assert len(catalog.errors) == 1
        finding = catalog.errors[0]
        assert finding.kind == ERROR
        assert finding.language == 'en'
        assert finding.namespace == 'common'
        assert finding.file == str(bad)
        # The remaining pairs still load
        assert catalog.tree('zh', 'common')['cancel'] == '取消'
        assert catalog.tree('en', 'modal')['old'] == 'Old'

    def test_non_object_root_is_an_error(self, config):
        catalog_path(config.locales_dir, 'zh', 'modal').write_text('["a", "b"]', encoding='utf-8')
        catalog = load_catalog(config)
        assert catalog.tree('zh', 'modal') == {}
        assert [finding.namespace for finding in catalog.errors] == ['modal']

    def test_unknown_language_directory(self, config):
        config.languages = ['zh', 'fr']
        catalog = load_catalog(config)
        assert catalog.keys('fr', 'common') == []
        assert catalog.errors == []

    def test_namespace_keys_union_across_languages(self, catalog):
        assert catalog.namespace_keys('common') == {'save', 'cancel', 'errors.crash.title', 'tags', 'extra'}

    def test_qualified_keys(self, catalog):
        assert catalog.qualified_keys('en') == {
            'common:cancel',
            'common:errors.crash.title',
            'common:tags',
            'common:extra',
            'modal:templates.title',
            'modal:old',
        }


class TestCatalogFiles:
    """Test reading and writing individual catalog files."""

    def test_catalog_path_layout(self, tmp_path):
        assert catalog_path(tmp_path, 'en', 'auth') == tmp_path / 'en' / 'auth.json'

    def test_parse_missing_file(self, tmp_path):
        assert parse_catalog(tmp_path / 'nope.json') == {}

    def test_parse_rejects_scalar(self, tmp_path):
        path = tmp_path / 'scalar.json'
        path.write_text('"text"', encoding='utf-8')
        with pytest.raises(CatalogParseError):
            parse_catalog(path)

    def test_save_json_keeps_unicode_and_trailing_newline(self, tmp_path):
        path = tmp_path / 'zh.json'
        save_json(path, {'save': '保存'})
        content = path.read_text(encoding='utf-8')
        assert content == '{\n  "save": "保存"\n}\n'
        assert json.loads(content) == {'save': '保存'}

    def test_save_json_replaces_file_whole(self, tmp_path):
        path = tmp_path / 'en.json'
        path.write_text('{"a": 1}\n', encoding='utf-8')
        path.chmod(0o644)

        save_json(path, {'b': 2})

        assert json.loads(path.read_text(encoding='utf-8')) == {'b': 2}
        assert path.stat().st_mode & 0o777 == 0o644
        assert [p.name for p in tmp_path.iterdir()] == ['en.json']

    def test_save_json_failure_keeps_original(self, tmp_path):
        path = tmp_path / 'en.json'
        path.write_text('{"a": 1}\n', encoding='utf-8')

        # Serialization fails halfway through the document
        with pytest.raises(TypeError):
            save_json(path, {'a': 2, 'b': object()})

        assert path.read_text(encoding='utf-8') == '{"a": 1}\n'
        assert [p.name for p in tmp_path.iterdir()] == ['en.json']

    def test_require_locales_dir(self, tmp_path):
        require_locales_dir(tmp_path)
        with pytest.raises(FileNotFoundError):
            require_locales_dir(tmp_path / 'missing')
