"""Tests for contrast_checker.core.rules — default rule set and rule-file parsing."""

import json
from pathlib import Path

import pytest
from contrast_checker.core.rules import DEFAULT_RULES, RulesError, load_rules, parse_rules
from contrast_checker.core.types import ValidationRule


class TestDefaultRules:
    def test_seven_rules_in_order(self) -> None:
        assert [r.name for r in DEFAULT_RULES] == [
            'Primary text on background',
            'Secondary text on background',
            'Primary text on card',
            'Primary text on surface',
            'White text on primary',
            'White text on danger',
            'White text on success',
        ]

    def test_all_require_aa_normal(self) -> None:
        assert all(r.required == 4.5 for r in DEFAULT_RULES)

    def test_roles(self) -> None:
        assert DEFAULT_RULES[0] == ValidationRule('Primary text on background', 'text-primary', 'bg', 4.5)
        assert DEFAULT_RULES[4].foreground == 'white'
        assert DEFAULT_RULES[4].background == 'primary'


class TestParseRules:
    def test_short_keys(self) -> None:
        rules = parse_rules([{'name': 'a', 'fg': 'white', 'bg': 'primary', 'required': 3}])
        assert rules == (ValidationRule('a', 'white', 'primary', 3.0),)

    def test_long_keys(self) -> None:
        rules = parse_rules([{'name': 'a', 'foreground': 'white', 'background': 'bg'}])
        assert rules[0].foreground == 'white'
        assert rules[0].background == 'bg'

    def test_defaults(self) -> None:
        rule = parse_rules([{'fg': 'white', 'bg': 'bg'}])[0]
        assert rule.name == 'white on bg'
        assert rule.required == 4.5

    def test_order_preserved(self) -> None:
        rules = parse_rules([{'name': n, 'fg': 'a', 'bg': 'b'} for n in ['z', 'y', 'x']])
        assert [r.name for r in rules] == ['z', 'y', 'x']

    def test_empty_list(self) -> None:
        assert parse_rules([]) == ()

    def test_not_a_list(self) -> None:
        with pytest.raises(RulesError, match='JSON list'):
            parse_rules({'fg': 'a', 'bg': 'b'})

    def test_entry_not_object(self) -> None:
        with pytest.raises(RulesError, match='#0'):
            parse_rules(['white on bg'])

    def test_missing_roles(self) -> None:
        with pytest.raises(RulesError, match='"fg" and "bg"'):
            parse_rules([{'name': 'a', 'fg': 'white'}])

    def test_required_must_be_number(self) -> None:
        with pytest.raises(RulesError, match='must be a number'):
            parse_rules([{'name': 'a', 'fg': 'white', 'bg': 'bg', 'required': '4.5'}])
        with pytest.raises(RulesError, match='must be a number'):
            parse_rules([{'name': 'a', 'fg': 'white', 'bg': 'bg', 'required': True}])


class TestLoadRules:
    def test_load(self, tmp_path: Path) -> None:
        f = tmp_path / 'rules.json'
        f.write_text(json.dumps([{'name': 'a', 'fg': 'white', 'bg': 'bg', 'required': 7}]))
        assert load_rules(f) == (ValidationRule('a', 'white', 'bg', 7.0),)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RulesError, match='not found'):
            load_rules(tmp_path / 'missing.json')

    def test_invalid_json(self, tmp_path: Path) -> None:
        f = tmp_path / 'rules.json'
        f.write_text('[')
        with pytest.raises(RulesError, match='not valid JSON'):
            load_rules(f)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RulesError, match='cannot be read'):
            load_rules(tmp_path)

    def test_not_utf8(self, tmp_path: Path) -> None:
        f = tmp_path / 'rules.json'
        f.write_bytes(b'[{"fg": "\xff", "bg": "bg"}]')
        with pytest.raises(RulesError, match='not valid UTF-8'):
            load_rules(f)
