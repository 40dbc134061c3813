"""Tests for file enumeration, key reference extraction and the hardcoded text scanner."""

import pytest

from i18n_tools.files import expand_braces, find_source_files, glob_to_regex, read_source
from i18n_tools.literal_scanner import (
    MARKUP,
    STRING,
    TEMPLATE,
    get_context,
    is_valid_text,
    scan_file,
    scan_line,
    scan_literals,
    should_skip_line,
)
from i18n_tools.source_scanner import extract_references, scan_references


class TestFiles:
    """Test glob-style file enumeration."""

    def test_expand_braces(self):
        assert expand_braces('**/*.{ts,tsx}') == ['**/*.ts', '**/*.tsx']
        assert expand_braces('{a,b}/{c,d}') == ['a/c', 'a/d', 'b/c', 'b/d']
        assert expand_braces('plain.js') == ['plain.js']

    def test_double_star_matches_any_depth(self):
        regex = glob_to_regex('**/*.ts')
        assert regex.match('a.ts')
        assert regex.match('x/y/a.ts')
        assert not regex.match('a.tsx')

    def test_single_star_stays_in_segment(self):
        regex = glob_to_regex('*.ts')
        assert regex.match('a.ts')
        assert not regex.match('x/a.ts')

    def test_directory_exclusion(self):
        regex = glob_to_regex('**/node_modules/**')
        assert regex.match('node_modules/lib/index.js')
        assert regex.match('pkg/node_modules/x.js')
        assert not regex.match('modules/x.js')

    def test_find_source_files_applies_patterns(self, config):
        files = find_source_files(config.src_dir, config.include_patterns, config.exclude_patterns)
        relative = [path.relative_to(config.src_dir).as_posix() for path in files]
        assert relative == ['App.tsx', 'pages/Templates.tsx']

    def test_missing_root_is_fatal(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_source_files(tmp_path / 'missing', ['**/*'], [])

    def test_unreadable_file_is_skipped(self, tmp_path, capsys):
        path = tmp_path / 'binary.ts'
        path.write_bytes(b'\xff\xfe\x00bad')
        assert read_source(path) is None
        assert 'Warning' in capsys.readouterr().out


class TestExtractReferences:
    """Test lexical extraction of translation keys."""

    def test_quote_styles(self):
        content = "t('a') t(\"ns:b.c\") t(`d`)"
        assert extract_references(content) == {'a', 'ns:b.c', 'd'}

    def test_member_call(self):
        assert extract_references("i18n.t('common:save')") == {'common:save'}

    def test_other_calls_ignored(self):
        content = "value.split(':'); getT('x'); format('y'); $t('z')"
        assert extract_references(content) == set()

    def test_dynamic_keys_ignored(self):
        content = "t(`errors.${code}`); t(key); t('prefix.' + name)"
        assert extract_references(content) == {'prefix.'}

    def test_duplicates_collapse(self):
        assert extract_references("t('save'); t('save'); t(\"save\")") == {'save'}

    def test_scan_references(self, config, references):
        assert scan_references(config) == references

    def test_scan_references_includes_build_and_dist_folders(self, config):
        for folder in ('components/build', 'dist'):
            path = config.src_dir / folder / 'Panel.tsx'
            path.parent.mkdir(parents=True)
            path.write_text("t('modal:old');\n", encoding='utf-8')

        assert 'modal:old' in scan_references(config)
        # The hardcoded text scan still skips build output
        files = find_source_files(config.src_dir, config.include_patterns, config.exclude_patterns)
        assert all(path.name != 'Panel.tsx' for path in files)


class TestLiteralFilter:
    """Test the hardcoded text heuristics."""

    def test_minimum_length(self):
        assert not is_valid_text('ok', min_length=3)
        assert is_valid_text('Yes!', min_length=3)
        assert not is_valid_text('Yes!', min_length=5)

    def test_digits_rejected(self):
        assert not is_valid_text('123')

    def test_urls_and_emails_rejected(self):
        assert not is_valid_text('https://example.com/path')
        assert not is_valid_text('http://example.com')
        assert not is_valid_text('someone@example.com')

    def test_css_like_tokens_rejected(self):
        assert not is_valid_text('my-class-name')
        assert is_valid_text('a-very-long-hyphenated-token')

    def test_identifiers_rejected(self):
        assert not is_valid_text('handleSubmit')
        assert not is_valid_text('$store_value')

    def test_already_translated_rejected(self):
        assert not is_valid_text("{t('common:save')}")
        assert not is_valid_text('const x = useTranslation()')

    def test_sentence_accepted(self):
        assert is_valid_text('Please confirm your email')


class TestLiteralScanner:
    """Test line scanning for hardcoded text."""

    def test_skipped_lines(self):
        assert should_skip_line('  // "Some comment text"')
        assert should_skip_line(' * Block comment text')
        assert should_skip_line('import x from "some module path";')
        assert should_skip_line('export const LABEL = "Hello there";')
        assert should_skip_line('console.log("Debug message here");')
        assert not should_skip_line('const label = "Hello there";')

    def test_plain_string(self):
        results = scan_line('const label = "Please confirm your email";', 'a.tsx', 7)
        assert len(results) == 1
        result = results[0]
        assert result.text == 'Please confirm your email'
        assert result.type == STRING
        assert result.file == 'a.tsx'
        assert result.line == 7

    def test_template_string(self):
        results = scan_line('const msg = `Hello there world`;', 'a.ts', 1)
        assert [(r.text, r.type) for r in results] == [('Hello there world', TEMPLATE)]

    def test_escaped_quotes(self):
        results = scan_line(r'const msg = "Say \"hi\" to everyone";', 'a.ts', 1)
        assert [r.text for r in results] == [r'Say \"hi\" to everyone']

    def test_markup_text(self):
        results = scan_line('<Button>Save changes</Button>', 'a.tsx', 3)
        assert [(r.text, r.type) for r in results] == [('Save changes', MARKUP)]

    def test_markup_with_attributes(self):
        results = scan_line('<div className="flex-row">No results found</div>', 'a.tsx', 1)
        assert [(r.text, r.type) for r in results] == [('No results found', MARKUP)]

    def test_skipped_line_yields_nothing(self):
        assert scan_line('// <p>Old text here</p>', 'a.tsx', 1) == []

    def test_context_window(self):
        line = 'a' * 30 + 'XYZ' + 'b' * 100
        assert get_context(line, 30) == line[10:80]
        assert get_context('  short "text"  ', 8) == 'short "text"'

    def test_scan_file_line_numbers(self, tmp_path):
        path = tmp_path / 'Page.tsx'
        path.write_text('const a = 1;\n<h1>Welcome back home</h1>\n', encoding='utf-8')
        results = scan_file(path)
        assert [(r.line, r.text) for r in results] == [(2, 'Welcome back home')]

    def test_scan_literals_over_project(self, config):
        results = scan_literals(config)
        texts = {r.text for r in results}
        assert 'Please confirm your email' in texts
        assert all('node_modules' not in r.file for r in results)
        assert all(not r.file.endswith('.test.tsx') for r in results)
