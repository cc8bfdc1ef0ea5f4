"""Services handling storefront events."""
