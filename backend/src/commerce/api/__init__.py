"""HTTP API routers for the commerce backend."""
