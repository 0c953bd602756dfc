"""
Helper utilities for data form pages.
Centralizes the Flask glue and the row preparation every page repeats.
"""

# Export all helpers for easy importing
from .request_helpers import get_real_ip, get_submitted_payload, get_form_state
from .response_helpers import form_response, validation_response, error_page
from .sorting_helpers import row_value, active_sort, sort_rows
from .search_helpers import matches, search_rows

__all__ = [
    # Request helpers
    'get_real_ip',
    'get_submitted_payload',
    'get_form_state',
    # Response helpers
    'form_response',
    'validation_response',
    'error_page',
    # Sorting helpers
    'row_value',
    'active_sort',
    'sort_rows',
    # Search helpers
    'matches',
    'search_rows',
]
