"""
Core domain models, checked arithmetic, errors and contracts.

This module contains the foundational building blocks that are independent
of any deployment mechanism (proxy, RPC, key management).
"""
