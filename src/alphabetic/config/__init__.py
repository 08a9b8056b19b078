"""Configuration: TOML models, settings resolution, and logging setup."""
