"""Configuration: pydantic-settings model and structlog setup."""
