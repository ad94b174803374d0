"""Terminal presentation for the drill CLI."""
