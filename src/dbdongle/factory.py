"""Build translators and schema admins from settings."""

from __future__ import annotations

import logging

from dbdongle.admin import Connection, SchemaAdmin
from dbdongle.dongle import Dongle
from dbdongle.settings import Settings

logger = logging.getLogger("dbdongle")


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())


def create_dongle(settings: Settings | None = None) -> Dongle:
    """Construct a :class:`Dongle` for the configured driver.

    Build one per connection and pass it to whatever needs it.
    """
    settings = settings or Settings()
    dongle = Dongle(
        settings.db_driver,
        table_prefix=settings.db_table_prefix,
        validate=settings.validate_sql,
    )
    logger.info(
        "Dongle ready (driver=%s, table_prefix=%r)", dongle.driver.value, dongle.table_prefix
    )
    return dongle


def create_schema_admin(
    connection: Connection,
    settings: Settings | None = None,
    dongle: Dongle | None = None,
) -> SchemaAdmin:
    """Construct a :class:`SchemaAdmin` bound to ``connection``."""
    settings = settings or Settings()
    return SchemaAdmin(dongle or create_dongle(settings), connection, strict=settings.db_strict)
