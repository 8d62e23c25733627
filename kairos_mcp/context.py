"""Service wiring shared by the MCP tools for the lifetime of the server."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sqlalchemy import Engine

from kairos_mcp.config import KairosConfig
from kairos_mcp.events import EventBus
from kairos_mcp.ports import EventPublisher, TaskStore, UserStore
from kairos_mcp.storage import SqlTaskStore, SqlUserStore, build_engine, create_schema

logger = logging.getLogger(__name__)


@dataclass
class KairosServices:
    """Collaborators injected into every tool call."""

    tasks: TaskStore
    users: UserStore
    events: EventPublisher
    config: KairosConfig = field(default_factory=KairosConfig)
    clock: Callable[[], datetime] = datetime.now


def build_services(config: KairosConfig, engine: Engine) -> KairosServices:
    create_schema(engine)
    return KairosServices(
        tasks=SqlTaskStore(engine),
        users=SqlUserStore(engine),
        events=EventBus(),
        config=config,
    )


@asynccontextmanager
async def kairos_lifespan(server: Any) -> AsyncIterator[KairosServices]:
    """FastMCP lifespan: build the stores on startup, release the engine on shutdown."""
    config = KairosConfig.from_env()
    engine = build_engine(config.database_url)
    services = build_services(config, engine)
    logger.info("Kairos services ready (database: %s)", engine.url.render_as_string(hide_password=True))
    try:
        yield services
    finally:
        engine.dispose()
