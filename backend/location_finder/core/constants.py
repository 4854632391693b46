"""
Centralized constants for lookups, listings and the scheduler.

Change caps or job IDs here instead of scattering literals across routes and services.
"""

# Listing caps
HISTORY_LIST_LIMIT = 20  # history panel shows the most recent N searches

# Geocoding request: one candidate with the structured address block
GEOCODER_SEARCH_PATH = "/search"
GEOCODER_RESULT_LIMIT = 1

# Selection state: sessions identified by X-Session-Id header (default below)
DEFAULT_SESSION_ID = "default"
# Least recently used sessions are evicted beyond this many (SELECTION_MAX_SESSIONS overrides)
DEFAULT_MAX_SESSIONS = 1000

# Longest address accepted; matches the location_details.address_key column
ADDRESS_MAX_LENGTH = 512

# Map click labels use this many decimals ("48.856600, 2.352200")
COORDINATE_DECIMALS = 6

# Scheduler job IDs (must match ids used in main.py add_job)
HISTORY_PRUNE_JOB_ID = "history_prune"
