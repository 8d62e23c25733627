"""MCP tool definitions for Kairos."""

# Import all tools to register them with the MCP server
from kairos_mcp.tools.planning import kairos_bankruptcy, kairos_load, kairos_plan, kairos_stats

__all__ = [
    "kairos_plan",
    "kairos_load",
    "kairos_bankruptcy",
    "kairos_stats",
]
