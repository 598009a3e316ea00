"""Readers for reference data and the upstream performance source."""
