"""Configuration and feature flags."""
