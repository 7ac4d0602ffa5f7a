"""
This module handles communication with the remote admissions Lead API.

Features:
- Submit public (website) leads
- Create leads from the internal dashboard
- Fetch lead filter options (quotas, genders, application statuses)
- Track UTM link clicks
- Build short-link redirect URLs

Every call returns (success, data, error). `error` is the message sent back
by the API, or None when the API gave none; callers pick their own fallback.
"""

import logging
from typing import Dict, Optional, Tuple
from urllib.parse import quote

import requests
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

APIResult = Tuple[bool, Optional[Dict], Optional[str]]

FILTER_OPTIONS_CACHE_KEY = 'leads:filter-options'


class LeadAPIClient:

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None, timeout: Optional[int] = None):

        self.base_url = (base_url or settings.LEAD_API_URL).rstrip('/')
        self.token = token if token is not None else settings.LEAD_API_TOKEN
        self.timeout = timeout or settings.LEAD_API_TIMEOUT

    def _get_headers(self) -> Dict[str, str]:

        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def _make_request(self, endpoint: str, method: str = 'POST', data: Optional[Dict] = None,
                      params: Optional[Dict] = None) -> APIResult:

        url = f"{self.base_url}{endpoint}"
        headers = self._get_headers()

        try:
            logger.info(f"Making {method} request to {url}")

            if method == 'GET':
                response = requests.get(url, headers=headers, params=params, timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(
                    url,
                    headers=headers,
                    json=data,
                    timeout=self.timeout
                )
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

            logger.info(f"Response status: {response.status_code}")

            try:
                response_data = response.json()
            except ValueError:
                response_data = None

            if 200 <= response.status_code < 300:
                return True, response_data if isinstance(response_data, dict) else {}, None

            # API returned error
            error_message = None
            if isinstance(response_data, dict):
                error_message = response_data.get('message') or None

            logger.error(f"API error {response.status_code}: {error_message or response.text[:200]}")
            return False, None, error_message

        except requests.exceptions.Timeout:
            logger.error(f"Request timeout - Lead API did not respond ({url})")
            return False, None, None

        except requests.exceptions.ConnectionError:
            logger.error(f"Connection error - Could not reach Lead API ({url})")
            return False, None, None

        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            return False, None, None

    def submit_public_lead(self, payload: Dict) -> APIResult:

        logger.info(f"Submitting public lead for {payload.get('phone')}")
        return self._make_request('/leads/public', method='POST', data=payload)

    def create_lead(self, payload: Dict) -> APIResult:

        logger.info(f"Creating lead for {payload.get('phone')}")
        return self._make_request('/leads', method='POST', data=payload)

    def get_filter_options(self) -> APIResult:
        """
        Filter options for lead forms. Successful responses are cached for
        LEAD_FILTER_OPTIONS_CACHE_SECONDS.
        """
        options = cache.get(FILTER_OPTIONS_CACHE_KEY)
        if options is not None:
            return True, options, None

        success, response_data, error = self._make_request('/leads/filter-options', method='GET')
        if not success:
            return False, None, error

        # Some deployments wrap the payload in {"data": {...}}
        options = response_data.get('data', response_data) if response_data else {}
        if not isinstance(options, dict):
            options = {}

        cache.set(FILTER_OPTIONS_CACHE_KEY, options, settings.LEAD_FILTER_OPTIONS_CACHE_SECONDS)
        return True, options, None

    def track_click(self, url: str) -> APIResult:

        logger.info(f"Tracking click for {url}")
        return self._make_request('/utm/track-click', method='POST', data={'url': url})

    def short_link_url(self, short_code: str) -> str:
        """Backend URL that resolves a short code, logs the click and redirects."""
        return f"{self.base_url}/utm/redirect/{quote(short_code, safe='')}"
