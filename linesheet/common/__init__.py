# Common utilities
from .config_loader import (
    load_airtable_credentials,
    load_airtable_settings,
    load_branding,
    load_category_display_names,
    load_config,
    load_layout_settings,
)
from .formatting import format_category_name, format_price
from .log_config import setup_logging
