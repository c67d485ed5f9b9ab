"""Catalog read endpoints."""
