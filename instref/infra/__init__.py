"""instref.infra -- application-side configuration."""

from instref.infra.config import (
    DEFAULT_LOGGING_CONFIG as DEFAULT_LOGGING_CONFIG,
)
from instref.infra.config import (
    LoggingConfig as LoggingConfig,
)
from instref.infra.config import (
    configure_logging as configure_logging,
)
