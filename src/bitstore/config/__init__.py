"""Configuration loading: config file discovery, settings, logging."""
