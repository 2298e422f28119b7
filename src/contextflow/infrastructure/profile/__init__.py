"""User profile adapters."""
