"""Infrastructure Layer — process-level setup (logging)."""
