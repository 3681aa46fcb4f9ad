"""Configuration layer — settings models, discovery, logging."""
