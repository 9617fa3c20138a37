"""Exception handlers and request logging."""
