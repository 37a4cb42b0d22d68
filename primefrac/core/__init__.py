"""
Core domain models, mathematical primitives, and contracts.

This module contains the numeric engine building blocks that are independent
of any user interface (CLI, report rendering).
"""
