"""txledger.infra — Configuration and logging setup."""

from txledger.infra.config import ReplayConfig as ReplayConfig
from txledger.infra.logging_config import LOGGER_NAME as LOGGER_NAME
from txledger.infra.logging_config import configure_logging as configure_logging
