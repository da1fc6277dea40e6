"""Loading rate tables from caller-supplied tabular data."""
