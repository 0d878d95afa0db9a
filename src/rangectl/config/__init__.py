"""Configuration: rangectl.toml models, discovery, settings and logging."""
