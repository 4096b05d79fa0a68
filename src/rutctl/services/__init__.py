"""Service layer: wraps the RUT domain functions in the ServiceResult contract."""
