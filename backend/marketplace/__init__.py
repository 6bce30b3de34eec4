"""Template marketplace backend: catalog, accounts, sessions and favorites."""
