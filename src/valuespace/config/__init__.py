"""Configuration: settings models, discovery, and logging setup."""
