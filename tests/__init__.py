"""
Test suite for pwn_oracle

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/fakes.py       : Counting in-memory collaborators (registry, feeds, tokens)
"""
