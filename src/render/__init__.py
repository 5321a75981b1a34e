"""Document rendering.

This module serializes hosts documents to canonical or human form.
"""
