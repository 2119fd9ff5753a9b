"""
Server Resources for Zoom MCP Server

Provides server status and health check resources.
"""

import time

from ..core.dependency_injection import get_config, get_service


def _auth_healthy() -> bool:
    try:
        return bool(get_service().token.access_token)
    except RuntimeError:
        return False


async def server_status() -> str:
    """Current server status, granted scopes and configuration."""
    try:
        config = get_config()
        auth_healthy = _auth_healthy()
        scopes = [s for s in get_service().token.scopes if s] if auth_healthy else []

        return f"""# Zoom Server Status

**Status**: {'Healthy' if auth_healthy else 'Degraded'}
**Timestamp**: {time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime())}
**Version**: {config.server_version}

## Configuration
- **API Base URL**: {config.api_base_url}
- **Read-only Mode**: {config.read_only_mode}
- **Transport**: {config.transport}

## Authentication
- **OAuth**: {'Active' if auth_healthy else 'Failed'}
- **Granted Scopes**: {len(scopes)}
{chr(10).join([f"- {scope}" for scope in scopes[:10]])}{chr(10) + '...' if len(scopes) > 10 else ''}
"""

    except Exception as e:
        return f"# Server Status Error\n\n**Error**: {str(e)}\n\nPlease check server logs for details."


async def health_check() -> str:
    """Health check for monitoring and load balancers."""
    auth_status = _auth_healthy()

    return f"""# Health Check

**Overall Status**: {'Healthy' if auth_status else 'Degraded'}
**Timestamp**: {time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime())}

## Component Health
- **Authentication**: {'healthy' if auth_status else 'failed'}

## Recommendations
{'Server is operating normally' if auth_status else 'Check authentication configuration and credentials'}
"""
