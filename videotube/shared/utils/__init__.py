"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from videotube.shared.utils.security import SecurityUtils
"""

from videotube.shared.utils.security import SecurityUtils, pwd_context

__all__ = [
    "SecurityUtils",
    "pwd_context",
]
