#!/usr/bin/env python3
"""
Zoom MCP Server - Dependency Injection Module

Provides module-level access to configuration and the authenticated Zoom
service for tools.
"""

from typing import TYPE_CHECKING, Optional
from .config import ZoomConfig

if TYPE_CHECKING:
    from ..services import ZoomIntegrationService

_config: Optional[ZoomConfig] = None
_service: Optional["ZoomIntegrationService"] = None

def set_dependencies(config: ZoomConfig, service: "ZoomIntegrationService") -> None:
    """Set the dependencies for tools to access."""
    global _config, _service
    _config = config
    _service = service

def get_config() -> ZoomConfig:
    """Get the current configuration instance."""
    if _config is None:
        raise RuntimeError("Dependencies not set. Call set_dependencies() first.")
    return _config

def get_service() -> "ZoomIntegrationService":
    """Get the authenticated Zoom service instance."""
    if _service is None:
        raise RuntimeError("Dependencies not set. Call set_dependencies() first.")
    return _service

def clear_dependencies() -> None:
    """Clear the stored dependencies."""
    global _config, _service
    _config = None
    _service = None
