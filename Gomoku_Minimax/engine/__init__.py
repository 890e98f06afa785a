"""Game rules: exploratory placement and win detection."""
