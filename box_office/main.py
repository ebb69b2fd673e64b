"""
Box Office Service - Main Application
Ticket lifecycle, show ticket initialization, categories and seat maps.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from box_office.platform.app_factory import create_app
from box_office.platform.config.di import container
from box_office.platform.config.wire_modules import WIRE_MODULES
from box_office.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from box_office.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifespan: startup and shutdown"""
    Logger.base.info('🚀 [Box Office] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Box Office] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️ [Box Office] Database tables ready')

    yield

    Logger.base.info('🛑 [Box Office] Shutting down...')
    await dispose_engine()
    container.unwire()
    Logger.base.info('👋 [Box Office] Shutdown complete')


app = create_app(lifespan=lifespan)
