"""
Helpers for campaign attribution on the public lead form
"""
from urllib.parse import urlencode

UTM_PARAMS = ('utm_source', 'utm_medium', 'utm_campaign', 'utm_term', 'utm_content')


def extract_utm_params(query_params):
    """
    Read UTM parameters from a query dict.

    Returns:
        dict with every UTM key; missing values are ''
    """
    return {name: (query_params.get(name) or '').strip() for name in UTM_PARAMS}


def should_track_click(query_params):
    """
    Short links resolve through the backend, which logs the click and lands
    here with redirect=true. Every other arrival is a direct long-URL click
    that still needs tracking.
    """
    return query_params.get('redirect') != 'true'


def utm_querystring(utm_params, **extra):
    """Query string carrying the non-empty UTM values (plus extra params)"""
    params = {name: value for name, value in utm_params.items() if value}
    params.update(extra)
    return urlencode(params)
