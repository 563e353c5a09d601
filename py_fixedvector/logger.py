"""Library logger for py_fixedvector.

Vector arithmetic is pure and never logs. Messages come from the settings layer:
where `basicConfig()` found its `.pyfv.toml`, TOML files missing the `[pyfv.settings]`
table, and values `VectorSettings.set()` rejected (a negative or non-finite tolerance,
a fractional precision, an unknown key).

Console output is at INFO level, so rejected settings are visible by default. Call
`enable_file_logging()` to also keep a DEBUG trace, e.g. to see which config file a
process picked up.

Examples:
    ```python
    from py_fixedvector import basicConfig
    from py_fixedvector.logger import enable_file_logging, disable_file_logging

    enable_file_logging("pyfv_settings.log")
    basicConfig()  # DEBUG: Found .pyfv.toml at /path/to/project
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
console_handler.setLevel(logging.DEBUG)

logger: logging.Logger = logging.getLogger('py_fixvec')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# Set by enable_file_logging(), None otherwise
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Also write every py_fixedvector message, DEBUG included, to `filename`.

    The file is opened in append mode. A previously enabled log file is closed first,
    so at most one file receives messages.
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Detach and close the log file; does nothing when none is open."""
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
