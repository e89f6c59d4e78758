"""Oak Bay bylaw search, result cache and citation validation."""
