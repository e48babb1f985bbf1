"""Validation, transitions, conflict detection and formatting."""
