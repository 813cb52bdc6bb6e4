"""Shared helpers used across the modpath package."""
