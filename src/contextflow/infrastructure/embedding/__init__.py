"""Embedding adapters."""
