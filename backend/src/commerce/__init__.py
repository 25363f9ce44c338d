"""Commerce store settings backend."""
