"""HTTP API receiving storefront events."""
