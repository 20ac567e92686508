"""Python client for the storefront API."""
