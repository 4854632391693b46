"""
Single source of truth for database tables that exist after migrations.

Use these names when writing raw SQL (e.g. TRUNCATE). Order is child-first so FK deletes succeed.
"""
ALL_TABLE_NAMES = (
    "favorites",
    "search_history",
    "location_coordinates",
    "location_details",
)

# Tables cleared when resetting per-user state; cached geocodes are kept.
USER_TABLE_NAMES = (
    "favorites",
    "search_history",
)
