"""Configuration modules (plain default dicts)."""
