"""Core building blocks: monitoring events, templating, data merging, config."""
