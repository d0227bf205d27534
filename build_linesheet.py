#!/usr/bin/env python3
"""
Build a wholesale line sheet from Airtable product records.

Features:
- Fetch products from Airtable (credentials from environment / .env)
- Or read a JSON export of Airtable records for offline builds
- Organize by category and material, paginate, render to HTML
- Print catalog statistics

Usage:
    # Fetch from Airtable and write HTML
    python3 build_linesheet.py --output output/linesheet.html

    # Build from a saved JSON export of records
    python3 build_linesheet.py --input output/records.json --output output/linesheet.html

    # Include products not flagged for the line sheet
    python3 build_linesheet.py --input output/records.json --include-inactive

    # Print statistics only
    python3 build_linesheet.py --input output/records.json --stats
"""

import argparse
import json
import logging
import os
import sys
from datetime import date

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from linesheet.airtable import AirtableAPIClient, records_to_products
from linesheet.common import (
    load_airtable_credentials,
    load_airtable_settings,
    load_branding,
    load_config,
    setup_logging,
)
from linesheet.layout import LineSheetError, LineSheetSettings, build_document, line_sheet_stats
from linesheet.rendering import LineSheetRenderer

logger = logging.getLogger("linesheet.build")

OUTPUT_HTML = "output/linesheet.html"


def load_records(path: str) -> list:
    """Load records from a JSON file (a list, or an API page with 'records')."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('records', [])
    return data


def fetch_records(config: dict):
    """Fetch all records from Airtable, or None on failure."""
    credentials = load_airtable_credentials()
    settings = load_airtable_settings(config)

    with AirtableAPIClient(
        access_token=credentials['access_token'],
        base_id=credentials['base_id'],
        table_name=credentials.get('table_name', settings['table_name']),
        base_url=settings['base_url'],
        requests_per_second=settings['requests_per_second'],
        max_retries=settings['max_retries'],
    ) as client:
        return client.list_records(view=settings['view'], page_size=settings['page_size'])


def main():
    parser = argparse.ArgumentParser(
        description="Build a wholesale line sheet from Airtable products",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--input', '-i', type=str,
                        help='JSON file of Airtable records (skips the API)')
    parser.add_argument('--output', '-o', type=str, default=OUTPUT_HTML,
                        help=f'Output HTML file (default: {OUTPUT_HTML})')
    parser.add_argument('--include-inactive', action='store_true',
                        help='Include products not flagged for the line sheet')
    parser.add_argument('--stats', action='store_true',
                        help='Print catalog statistics instead of writing HTML')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    parser.add_argument('--quiet', '-q', action='store_true', help='Warnings only')

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    load_dotenv()

    config = load_config()

    if args.input:
        if not os.path.exists(args.input):
            logger.error("Input file not found: %s", args.input)
            sys.exit(1)
        records = load_records(args.input)
    else:
        try:
            records = fetch_records(config)
        except ValueError as e:
            logger.error("%s", e)
            sys.exit(1)
        if records is None:
            logger.error("Could not fetch products from Airtable")
            sys.exit(1)

    products = records_to_products(records)
    settings = LineSheetSettings.from_config(config, include_inactive=args.include_inactive)

    try:
        document = build_document(products, settings)
    except LineSheetError as e:
        logger.error("Line sheet generation failed: %s", e)
        sys.exit(1)

    if args.stats:
        print(json.dumps(line_sheet_stats(document.organized), indent=2, default=str))
        return

    renderer = LineSheetRenderer(branding=load_branding(config), generated_on=date.today())
    html = renderer.render_document(document.pages, document.organized.summary)

    os.makedirs(os.path.dirname(args.output) or '.', exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
        f.write(html)

    print(f"Wrote {document.page_count} page(s) to {args.output}")


if __name__ == '__main__':
    main()
