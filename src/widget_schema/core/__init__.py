"""Core engine: configuration, discovery, position resolution and orchestration."""
