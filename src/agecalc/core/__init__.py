"""Value types, errors and the legacy calendar arithmetic."""
