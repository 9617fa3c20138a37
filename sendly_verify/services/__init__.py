"""Verification services."""
