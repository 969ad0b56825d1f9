import logging

from commerce_admin.core.config import Settings

LOG_FORMAT = "%(levelname)s : %(asctime)s | %(name)s | %(message)s"

# Third-party loggers that are silenced down to log_level_sql
_SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")


def setup_logging(settings: Settings) -> None:
    """Configures logging levels from the settings. Call once at startup."""
    root_level = logging.DEBUG if settings.debug else _parse_level(settings.log_level)
    logging.basicConfig(level=root_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(root_level)

    sql_level = _parse_level(settings.log_level_sql)
    for name in _SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO
