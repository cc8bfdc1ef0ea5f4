"""Relay storefront events to a Mailchimp audience."""

__version__ = "0.1.0"
