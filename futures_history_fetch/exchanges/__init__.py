"""Exchange-specific page sources."""
