"""
Shared constants for the import pipeline.

This module has no dependencies on models or services to avoid circular imports.
"""

# Maximum number of catalog candidates scored per exercise
CATALOG_CANDIDATE_LIMIT = 20

# Page size used when preloading the whole exercise catalog
CATALOG_PAGE_SIZE = 1000

# Minimum resolver score for a candidate to be accepted
EXERCISE_MATCH_THRESHOLD = 5.0
