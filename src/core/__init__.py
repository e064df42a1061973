"""
Core integer value types, arithmetic engine, and invariants.

This module contains the foundational building blocks that are independent
of backend selection and of the runtime API.
"""
