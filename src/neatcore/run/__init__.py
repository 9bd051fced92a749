"""
Run Package

Configuration and logging setup used by the genome operators.

Exported:
    Config:            Operator parameters, read from an INI file or defaults
    configure_logging: Enable and configure neatcore's loguru output
    disable_logging:   Silence neatcore's loguru output
"""

from neatcore.run.config         import Config
from neatcore.run.logging_config import configure_logging, disable_logging

__all__ = ['Config',
           'configure_logging',
           'disable_logging']
