"""Domain models for vocabulary generation."""
