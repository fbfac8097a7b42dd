"""Core: settings, constants, lifespan, exception handlers, rate limiting."""
