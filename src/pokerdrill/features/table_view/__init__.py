"""Projection of a drill scenario onto the table client's state message."""

from .projection import game_state_name, to_table_state

__all__ = ["game_state_name", "to_table_state"]
