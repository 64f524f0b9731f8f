"""Database models for the GenAI audit trail."""
