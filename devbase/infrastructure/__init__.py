"""Infrastructure layer: auth, persistence, rate limiting and web."""
