"""Daily recommendation scheduler."""
