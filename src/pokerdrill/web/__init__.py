"""HTTP entry point for the drill API."""
