"""Conversion pipeline for journal exports."""
