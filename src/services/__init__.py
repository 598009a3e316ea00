"""Fetching, caching, and comparison services."""
