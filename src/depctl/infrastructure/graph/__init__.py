"""Package dependency graph backed by NetworkX."""
