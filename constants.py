"""
Common constants used across the data table form package.

The reserved keys below are part of the wire contract with the client
runtime: they appear as segments in field names like ``form[sort][city]``.
"""

# Values that are considered "false" for boolean flags and environment variables
# Include empty string to handle unset or blank values
FALSE_VALUES = {'false', '0', 'no', 'off', ''}

# Value written into reserved flag fields by behaviors
TRUE_VALUE = 'true'

# Reserved keys nested under the form name
SORTING_STATE_KEY = 'sort'
SORT_COLUMN_KEY = 'sort_column'
SEARCHING_STATE_KEY = 'search'
SEARCH_OPERATOR_KEY = 'search_op'
ONLY_DISPLAY_FORM_KEY = 'only_display_form'
ONLY_VALIDATE_KEY = 'only_validate'
RESET_KEY = 'reset'
HEIGHT_KEY = 'height'
WIDTH_KEY = 'width'

# Sort tokens
SORTING_STATE_ASC = 'asc'
SORTING_STATE_DESC = 'desc'
SORTING_STATES = frozenset({SORTING_STATE_ASC, SORTING_STATE_DESC})

# Sort type of a column marked sortable without naming one
DEFAULT_SORT_TYPE = 'alphanumeric'

# Search types (text and numeric comparisons)
SEARCH_LIKE = 'like'
SEARCH_RLIKE = 'rlike'
SEARCH_GREATER_THAN = 'gt'
SEARCH_GREATER_OR_EQUAL = 'ge'
SEARCH_LESS_THAN = 'lt'
SEARCH_LESS_OR_EQUAL = 'le'
SEARCH_EQUAL = 'eq'

TEXT_SEARCH_TYPES = (SEARCH_LIKE, SEARCH_RLIKE)
NUMERIC_SEARCH_TYPES = (
    SEARCH_GREATER_THAN,
    SEARCH_GREATER_OR_EQUAL,
    SEARCH_LESS_THAN,
    SEARCH_LESS_OR_EQUAL,
    SEARCH_EQUAL,
)

NUMERIC_SEARCH_LABELS = {
    SEARCH_GREATER_THAN: '>',
    SEARCH_GREATER_OR_EQUAL: '>=',
    SEARCH_LESS_THAN: '<',
    SEARCH_LESS_OR_EQUAL: '<=',
    SEARCH_EQUAL: '=',
}

# Widget placement relative to the table
PLACEMENT_TOP = 'top'
PLACEMENT_BOTTOM = 'bottom'
PLACEMENTS = (PLACEMENT_TOP, PLACEMENT_BOTTOM)

# HTTP methods a form may use
METHOD_GET = 'get'
METHOD_POST = 'post'
FORM_METHODS = (METHOD_GET, METHOD_POST)

# CSS classes emitted by the table renderer
ROW_CLASS_EVEN = 'standard_row_even'
ROW_CLASS_ODD = 'standard_row_odd'
ROW_BASE_CLASS = 'unshadedbg'
HEADER_ROW_CLASS = 'standard-table-header'
TABLE_STRIPE_CLASSES = 'table-stripeclass:shadedbg table-altstripeclass:shadedbg'
TABLE_AUTOSORT_CLASS = 'table-autosort'

# Indicators shown before a remotely sorted column header
SORT_INDICATORS = {
    SORTING_STATE_ASC: '&uarr; ',
    SORTING_STATE_DESC: '&darr; ',
}

# Attribute carrying the JSON action description for the client runtime
ACTION_ATTRIBUTE = 'data-form-action'

# Suffix appended to the form name for the flash (message) region
FLASH_SUFFIX = '_flash'
