"""HTTP API for word translation and verse alignment."""
