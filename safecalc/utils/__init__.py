"""
Shared utilities for the safecalc package.

Holds the guarded division helper used by the score
table and available to callers directly.
"""
