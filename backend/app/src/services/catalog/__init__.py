"""Catalog sweep, timepiece selection and tax-aware cost aggregation."""
