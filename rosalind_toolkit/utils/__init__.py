"""Utility helpers for the Rosalind toolkit."""
