"""Clinic portal web tier."""
