from __future__ import annotations

import asyncio

from loguru import logger

from hospital.core.config import get_settings
from hospital.core.logging import setup_logging
from hospital.services.db import get_engine, init_db


async def bootstrap() -> None:
    settings = get_settings()
    setup_logging(settings.logging.level, echo_sql=settings.database_echo)

    engine = get_engine()
    try:
        await init_db(engine, seed=settings.seed_data)
    finally:
        await engine.dispose()
    logger.info("Hospital data store initialised (env={env})", env=settings.env)


def main() -> None:
    asyncio.run(bootstrap())


if __name__ == "__main__":
    main()
