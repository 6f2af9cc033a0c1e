"""Shared utilities for widget_schema."""
