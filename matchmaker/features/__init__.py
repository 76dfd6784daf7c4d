"""Feature slices of the matchmaking service."""
