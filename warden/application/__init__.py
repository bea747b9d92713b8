"""Application layer (session command handlers)."""
