"""
Core numeric primitives, domain models and contracts.

This module contains the foundational building blocks: deterministic
fixed-point numbers, bounded values and their serialized forms.
"""
