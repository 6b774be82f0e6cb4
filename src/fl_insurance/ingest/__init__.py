"""Ingestion utilities for the pipeline.

Provides the zip archive reader and the CSV loader that turns the archived
text into validated `InsuranceRecord` objects.
"""
