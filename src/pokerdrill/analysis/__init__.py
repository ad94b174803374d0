"""Regression aids built on the generator."""
