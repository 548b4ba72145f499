"""Filters driven by the user's fitness level."""
