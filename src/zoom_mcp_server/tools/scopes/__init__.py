#!/usr/bin/env python3
"""
Scope Tools Module

This module provides scope and token information operations.
"""

from .scope_tools import manage_scopes

__all__ = ["manage_scopes"]
