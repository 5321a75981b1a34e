"""Hosts file ingestion.

This module classifies addresses and parses raw lines into entries.
It builds ordered documents for the store and transform layers.
"""
