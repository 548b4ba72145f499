"""Filters protecting muscles still recovering from recent sessions."""
