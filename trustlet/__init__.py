"""Trustlet review collection backend."""
