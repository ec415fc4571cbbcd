"""structlog setup for live browser sessions."""

import logging
import sys

import structlog

from loglines_e2e.config.settings import get_settings

# Stdlib loggers that flood DEBUG/INFO output during browser runs
CHATTY_LOGGERS = ("playwright", "asyncio", "urllib3")


def configure_logging() -> None:
    """Configure structlog for an E2E session.

    Every event carries the Keycloak host under test. Playwright's driver
    and asyncio never log below WARNING.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.debug:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(keycloak_host=settings.keycloak_host)

    logging.basicConfig(format="%(name)s %(levelname)s %(message)s", stream=sys.stdout, level=log_level)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
