"""Output contracts: JSON schemas for machine-readable reports."""
