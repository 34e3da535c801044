"""Data models for cluster resources and application settings."""
