"""
Airtable API Client

Client for the Airtable REST API (v0).
Handles authentication, rate limiting, pagination and error handling.
"""

import logging
import time
from typing import Dict, List, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class AirtableAPIClient:
    """
    Client for reading product records from an Airtable table.

    Handles:
    - Bearer token authentication
    - Rate limiting (5 requests/second by default)
    - Retries on 429 and gateway errors
    - Offset-based pagination

    Usage:
        client = AirtableAPIClient(access_token="patXXX", base_id="appXXX")

        # All records in a view
        records = client.list_records(view="Grid view")

        # Single record
        record = client.get_record("recXXX")
    """

    BASE_URL = "https://api.airtable.com/v0"
    MAX_RETRIES = 3
    RETRYABLE_STATUS_CODES = {429, 502, 503, 504}

    def __init__(
        self,
        access_token: str,
        base_id: str,
        table_name: str = "Products",
        base_url: str = BASE_URL,
        requests_per_second: float = 5,
        max_retries: int = MAX_RETRIES,
    ):
        """
        Initialize the API client.

        Args:
            access_token: Airtable personal access token ("pat...")
            base_id: Airtable base id ("app...")
            table_name: Table holding product records
            base_url: API root URL
            requests_per_second: Maximum request rate
            max_retries: Attempts per request before giving up
        """
        if not access_token.startswith("pat"):
            logger.warning("Airtable personal access token should start with 'pat'")
        if not base_id.startswith("app"):
            logger.warning("Airtable base id should start with 'app'")

        self.base_id = base_id
        self.table_name = table_name
        self.max_retries = max_retries
        self.base_url = base_url.rstrip("/")
        self.table_url = f"{self.base_url}/{base_id}/{quote(table_name, safe='')}"

        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        })

        # Rate limiting
        self.requests_made = 0
        self.last_request_time = 0.0
        self.min_request_interval = 1.0 / requests_per_second

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _rate_limit(self):
        """Keep requests at or below the configured rate."""
        now = time.time()
        elapsed = now - self.last_request_time

        if elapsed < self.min_request_interval:
            time.sleep(self.min_request_interval - elapsed)

        self.last_request_time = time.time()
        self.requests_made += 1

    def get(self, url: str, params: Optional[Dict] = None, timeout: int = 30) -> Optional[Dict]:
        """
        Make a GET request with rate limiting and error handling.

        Args:
            url: Full request URL
            params: Query string parameters
            timeout: Request timeout in seconds

        Returns:
            Response JSON or None on error
        """
        for attempt in range(self.max_retries):
            self._rate_limit()

            try:
                response = self.session.get(url, params=params, timeout=timeout)

                # Retry on rate limiting or server errors
                if response.status_code in self.RETRYABLE_STATUS_CODES:
                    retry_after = int(response.headers.get("Retry-After", 2 ** attempt))
                    logger.warning("HTTP %d on %s, retry %d/%d in %ds...",
                                   response.status_code, url, attempt + 1,
                                   self.max_retries, retry_after)
                    time.sleep(retry_after)
                    continue

                if response.status_code == 401:
                    logger.error("Invalid Airtable access token or insufficient permissions")
                    return None
                if response.status_code == 403:
                    logger.error("Access forbidden, check token scopes and base permissions")
                    return None
                if response.status_code == 404:
                    logger.error("Not found: %s (check base id and table name)", url)
                    return None
                if response.status_code >= 400:
                    logger.error("API Error %d: %s", response.status_code, response.text[:200])
                    return None

                return response.json()

            except requests.exceptions.Timeout:
                logger.error("Request timeout: %s", url)
                return None
            except requests.exceptions.RequestException as e:
                logger.error("Request failed: %s", e)
                return None

        logger.error("Max retries (%d) exceeded for GET %s", self.max_retries, url)
        return None

    def list_records(
        self,
        view: Optional[str] = None,
        page_size: int = 100,
        filter_by_formula: Optional[str] = None,
        max_records: Optional[int] = None,
    ) -> Optional[List[Dict]]:
        """
        Fetch every record in the table, following pagination offsets.

        Args:
            view: Airtable view name
            page_size: Records per request (Airtable allows up to 100)
            filter_by_formula: Airtable formula to filter records
            max_records: Stop after this many records

        Returns:
            List of raw record dicts ({id, createdTime, fields}) or None on error
        """
        params = {"pageSize": page_size}
        if view:
            params["view"] = view
        if filter_by_formula:
            params["filterByFormula"] = filter_by_formula
        if max_records:
            params["maxRecords"] = max_records

        records: List[Dict] = []
        offset = None

        while True:
            if offset:
                params["offset"] = offset

            result = self.get(self.table_url, params=dict(params))
            if result is None:
                return None

            records.extend(result.get("records", []))
            offset = result.get("offset")
            logger.debug("Fetched %d record(s) so far", len(records))

            if not offset:
                break

        logger.info("Fetched %d record(s) from %s", len(records), self.table_name)
        return records

    def get_record(self, record_id: str) -> Optional[Dict]:
        """Fetch a single record by id."""
        return self.get(f"{self.table_url}/{record_id}")

    def test_connection(self) -> bool:
        """
        Test API connection by fetching one record.

        Returns:
            True if connection successful
        """
        result = self.get(self.table_url, params={"maxRecords": 1})
        if result is not None and "records" in result:
            logger.info("Connected to Airtable table: %s", self.table_name)
            return True
        return False
