"""Domain types, errors and API contracts."""
