# /tests/test_logging_config.py

import logging

from campus_admin.core.logging_config import setup_logging, LOGGING_CONFIG


def test_setup_logging_configures_application_logger():
    setup_logging()
    app_logger = logging.getLogger("campus_admin")

    assert app_logger.handlers
    assert app_logger.propagate is False
    assert logging.getLevelName(app_logger.level) == LOGGING_CONFIG["loggers"]["campus_admin"]["level"]


def test_sql_echo_stays_quiet_by_default():
    setup_logging()
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
