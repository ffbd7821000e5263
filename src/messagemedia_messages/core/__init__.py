"""Core helpers: URL/JSON handling, errors, outcomes, model mapping."""
