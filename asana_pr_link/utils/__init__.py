"""Shared utilities for asana-pr-link."""
