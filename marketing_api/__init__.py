"""Amana Marketing API: campaign records and statistics behind token authentication."""
