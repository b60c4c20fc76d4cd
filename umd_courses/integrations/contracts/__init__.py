"""
Contracts (data models).

This folder defines the shapes exchanged with the UMD course catalog, e.g.:
- a course record as returned by the API (kept opaque)
- cache entries and the cache backend interface
- the mock strategy options

Why this exists:
- The live client, the fixture mocks and the cache backends agree on one shape
- Course records stay opaque so upstream schema changes pass through untouched
"""
