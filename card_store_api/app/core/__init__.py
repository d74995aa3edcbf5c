"""Configuration, logging, error handling and shared dependencies."""
