"""
Core domain models, fixed-point primitives, and error taxonomy.

This module contains the foundational building blocks that are independent
of external contracts (feed registry, price feeds, tokens).
"""
