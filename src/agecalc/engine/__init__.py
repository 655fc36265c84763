"""Interval engine: parse -> difference -> assemble -> convert, per record."""
