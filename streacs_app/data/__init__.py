"""
Data loading and indexing module.

Handles fetching the named sources with fallbacks, parsing them into
canonical records, and the country/year indexes and name normalization
used by the query layer.
"""
