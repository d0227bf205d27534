"""Tests for linesheet/common/config_loader.py"""

import pytest

from linesheet.common.config_loader import (
    load_airtable_credentials,
    load_airtable_settings,
    load_branding,
    load_category_display_names,
    load_config,
    load_layout_settings,
)


class TestLoadLayoutSettings:
    def test_defaults_when_missing(self):
        assert load_layout_settings({}) == {'products_per_page': 4, 'toc_items_per_page': 25}

    def test_custom_values(self):
        config = {'layout': {'products_per_page': 6, 'toc_items_per_page': 30}}
        assert load_layout_settings(config) == {'products_per_page': 6, 'toc_items_per_page': 30}

    @pytest.mark.parametrize("value", [0, -2, "4", 1.5, None])
    def test_invalid_density_raises(self, value):
        with pytest.raises(ValueError, match="positive integer"):
            load_layout_settings({'layout': {'products_per_page': value}})


class TestLoadBranding:
    def test_fills_defaults(self):
        branding = load_branding({'branding': {'brand_name': 'Acme'}})
        assert branding['document_title'] == 'Acme - Line Sheet'
        assert branding['statement'] == []
        assert branding['contact'] == {}

    def test_empty_config(self):
        assert load_branding({})['brand_name'] == 'Line Sheet'


class TestLoadAirtableSettings:
    def test_overrides_defaults(self):
        settings = load_airtable_settings({'airtable': {'view': 'Line Sheet', 'max_retries': 5}})
        assert settings['view'] == 'Line Sheet'
        assert settings['max_retries'] == 5
        assert settings['page_size'] == 100


class TestLoadAirtableCredentials:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('AIRTABLE_ACCESS_TOKEN', 'patTest.123')
        monkeypatch.setenv('AIRTABLE_BASE_ID', 'appTest')
        monkeypatch.setenv('AIRTABLE_TABLE_NAME', 'Inventory')
        assert load_airtable_credentials() == {
            'access_token': 'patTest.123',
            'base_id': 'appTest',
            'table_name': 'Inventory',
        }

    def test_table_name_optional(self, monkeypatch):
        monkeypatch.setenv('AIRTABLE_ACCESS_TOKEN', 'patTest.123')
        monkeypatch.setenv('AIRTABLE_BASE_ID', 'appTest')
        monkeypatch.delenv('AIRTABLE_TABLE_NAME', raising=False)
        assert 'table_name' not in load_airtable_credentials()

    def test_missing_token_raises(self, monkeypatch):
        monkeypatch.delenv('AIRTABLE_ACCESS_TOKEN', raising=False)
        monkeypatch.setenv('AIRTABLE_BASE_ID', 'appTest')
        with pytest.raises(ValueError, match="AIRTABLE_ACCESS_TOKEN"):
            load_airtable_credentials()

    def test_missing_base_raises(self, monkeypatch):
        monkeypatch.setenv('AIRTABLE_ACCESS_TOKEN', 'patTest.123')
        monkeypatch.delenv('AIRTABLE_BASE_ID', raising=False)
        with pytest.raises(ValueError, match="AIRTABLE_BASE_ID"):
            load_airtable_credentials()


class TestLoadFromConfigFiles:
    """Tests that load the real config YAML file from the repo."""

    def test_load_config_returns_dict(self):
        config = load_config()
        assert isinstance(config, dict)
        assert 'layout' in config

    def test_repo_layout_settings(self):
        assert load_layout_settings() == {'products_per_page': 4, 'toc_items_per_page': 25}

    def test_repo_branding_has_name(self):
        assert load_branding()['brand_name']

    def test_repo_display_names(self):
        assert load_category_display_names()['Pendant'] == 'PENDANTS'

    def test_load_config_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_file.yaml")
