"""
Configuration Loader

Loads the YAML configuration for layout densities, branding copy,
category display names and Airtable settings. Credentials come from
the environment (see load_airtable_credentials).
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml

from .constants import DEFAULT_PRODUCTS_PER_PAGE, DEFAULT_TOC_ITEMS_PER_PAGE

DEFAULT_CONFIG_FILE = 'linesheet.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'linesheet.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_layout_settings(config: Dict[str, Any] = None) -> Dict[str, int]:
    """
    Load page densities.

    Returns:
        Dictionary with products_per_page and toc_items_per_page

    Raises:
        ValueError: If a density is not a positive integer
    """
    if config is None:
        config = load_config()

    layout = config.get('layout') or {}
    settings = {
        'products_per_page': layout.get('products_per_page', DEFAULT_PRODUCTS_PER_PAGE),
        'toc_items_per_page': layout.get('toc_items_per_page', DEFAULT_TOC_ITEMS_PER_PAGE),
    }
    for key, value in settings.items():
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError(f"layout.{key} must be a positive integer (got {value!r})")
    return settings


def load_branding(config: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Load cover page branding.

    Returns:
        Dictionary with brand_name, tagline, document_title, statement,
        ordering_instructions and contact (plus placeholder_image when set)
    """
    if config is None:
        config = load_config()

    branding = dict(config.get('branding') or {})
    branding.setdefault('brand_name', 'Line Sheet')
    branding.setdefault('tagline', '')
    branding.setdefault('document_title', f"{branding['brand_name']} - Line Sheet")
    branding.setdefault('statement', [])
    branding.setdefault('ordering_instructions', [])
    branding.setdefault('contact', {})
    return branding


def load_category_display_names(config: Dict[str, Any] = None) -> Dict[str, str]:
    """
    Load extra category display names.

    Returns:
        Dictionary mapping raw category name to display heading

    Example:
        {'Pendant': 'PENDANTS', 'Pendants': 'PENDANTS'}
    """
    if config is None:
        config = load_config()

    return dict(config.get('category_display_names') or {})


def load_airtable_settings(config: Dict[str, Any] = None) -> Dict[str, Any]:
    """Load Airtable connection settings (non-secret)."""
    if config is None:
        config = load_config()

    settings = {
        'base_url': 'https://api.airtable.com/v0',
        'table_name': 'Products',
        'view': 'Grid view',
        'page_size': 100,
        'requests_per_second': 5,
        'max_retries': 3,
    }
    settings.update(config.get('airtable') or {})
    return settings


def load_airtable_credentials() -> Dict[str, str]:
    """
    Read Airtable credentials from the environment.

    Call python-dotenv's load_dotenv() first to pick up a .env file.

    Raises:
        ValueError: If the access token or base id is missing
    """
    access_token = os.environ.get('AIRTABLE_ACCESS_TOKEN', '')
    base_id = os.environ.get('AIRTABLE_BASE_ID', '')

    if not access_token:
        raise ValueError("AIRTABLE_ACCESS_TOKEN environment variable is required")
    if not base_id:
        raise ValueError("AIRTABLE_BASE_ID environment variable is required")

    credentials = {
        'access_token': access_token,
        'base_id': base_id,
    }
    table_name = os.environ.get('AIRTABLE_TABLE_NAME')
    if table_name:
        credentials['table_name'] = table_name
    return credentials
