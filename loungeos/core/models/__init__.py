"""Core models and schemas for LoungeOS."""
