"""Roster keeping with validated, persisted player records."""
