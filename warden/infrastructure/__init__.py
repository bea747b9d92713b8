"""Infrastructure adapters (stores, security, notifiers, logging)."""
