"""Hard filters that remove exercises from today's candidate pool."""
