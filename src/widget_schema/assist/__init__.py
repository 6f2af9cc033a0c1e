"""Authoring assistance: completions, insertion text and editor commands."""
