"""PAU Inventory web application."""
