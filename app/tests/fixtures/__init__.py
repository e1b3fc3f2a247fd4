"""Static test data."""
