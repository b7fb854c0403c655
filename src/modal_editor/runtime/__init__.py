"""Process-wide services: telemetry and settings."""
