"""Resource controllers."""
