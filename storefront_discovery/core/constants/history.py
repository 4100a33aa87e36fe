"""
History constants — recently-viewed list bounds and cookie attributes.
"""

# Upper bound of the recently-viewed list carried in the cookie
MAX_VIEWED_HANDLES: int = 60

# Upper bound of handles resolved in one batched catalog lookup
MAX_EXPANDED_HANDLES: int = 25

HISTORY_COOKIE_NAME: str = "rv"
HISTORY_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 365  # 1 year

# Shopify caps product handles at 255 characters
MAX_HANDLE_LENGTH: int = 255

# Browsers drop cookies over ~4 KB including name and attributes
MAX_COOKIE_VALUE_BYTES: int = 3800
