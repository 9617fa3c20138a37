"""Application core: factory, lifespan and middleware."""
