"""Shared application constants.

Centralizes the keys and defaults used by persistence, pay math and the
client so they stay consistent in one place.
"""

# Tracked weekdays, in display order. Weekends are not logged.
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")

# Name of the only row in the settings table
HOURLY_RATE_SETTING = "hourly_rate"

# Label used for extras saved without one
DEFAULT_EXTRA_LABEL = "Reimbursement"

# Hours, rates and extra amounts are kept to cents / hundredths of an hour
MONEY_PLACES = 2

# Fixed display locale
CURRENCY_SYMBOL = "$"
