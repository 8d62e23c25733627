"""FastMCP server initialization for Kairos MCP."""

import logging

from mcp.server.fastmcp import FastMCP

from kairos_mcp.config import KairosConfig
from kairos_mcp.context import kairos_lifespan

# Initialize the MCP server
mcp = FastMCP("kairos_mcp", lifespan=kairos_lifespan)


def run() -> None:
    """Run the MCP server."""
    logging.basicConfig(
        level=KairosConfig.from_env().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    run()
