"""Document storage layer.

This module holds the ordered entry sequence for one hosts file
and persists rendered documents back to disk or streams.
"""
