"""Helm runtime primitives shared by game modules."""
