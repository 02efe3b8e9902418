"""
Core domain models, conversion algorithms, and contracts.

This module contains the pure building blocks: no I/O, no logging,
no shared mutable state.
"""
