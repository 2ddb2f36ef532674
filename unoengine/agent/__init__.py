"""Player protocol."""
