"""Edit translation entries across all locale and namespace files."""
