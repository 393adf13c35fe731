"""The package contains various helpers used in picklist."""
