"""Data files shared across layers."""
