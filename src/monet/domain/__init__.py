"""Domain model: amounts, currency codes, rate tables, money and deferred operations."""
