"""Outer layers built on top of the scenario generator."""
