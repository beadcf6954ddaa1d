"""Query construction, data access and incident business rules."""
