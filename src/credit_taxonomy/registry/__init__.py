"""Role taxonomy registry: static catalog, query helpers, integrity checks."""
