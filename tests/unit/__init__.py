"""Unit tests for individual modules."""
