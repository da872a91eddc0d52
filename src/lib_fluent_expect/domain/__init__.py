"""Domain layer: diagnostics, check results, and the error taxonomy."""
