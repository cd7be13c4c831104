"""Configuration package: environment-backed settings and logging setup."""
