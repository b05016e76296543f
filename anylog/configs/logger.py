import logging

import structlog

from anylog.configs.config import settings

# the facade's own diagnostics; silent unless ANYLOG_DIAGNOSTICS_LEVEL is lowered
_stdlib_logger = logging.getLogger("anylog.internal")
_stdlib_logger.setLevel(settings.diagnostics_level)

logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
    _stdlib_logger,
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
)
