"""Standalone tools for the PAU Inventory app: migration runner and API client."""
