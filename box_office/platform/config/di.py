"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from box_office.platform.config.core_setting import Settings
from box_office.platform.database.orm_db_setting import Database
from box_office.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from box_office.service.ticketing.domain.barcode import BarcodeGenerator


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware engine, one session per unit of work)
    database = providers.Singleton(Database)

    # New UoW per request; it opens its own session on `async with`
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork,
        session_factory=database.provided.session_factory,
    )

    barcode_generator = providers.Singleton(
        BarcodeGenerator,
        prefix=config_service.provided.BARCODE_PREFIX,
        random_bytes=config_service.provided.BARCODE_RANDOM_BYTES,
    )


container = Container()
