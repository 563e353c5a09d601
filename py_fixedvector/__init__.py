"""Fixed-dimension numeric vectors for geometry and physics computations."""

import importlib.metadata

__version__ = importlib.metadata.version("py_fixedvector")

# Standard library imports
import os
import sys
from typing import Mapping, Optional, Union

# Local imports
from .logger import logger as log
from .settings import VectorSettings

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load settings from a .pyfv.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyfv.toml or pyfv.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pyfv_toml(start_dir: Optional[str] = None) -> Optional[str]:
        """Search for .pyfv.toml or pyfv.toml walking up from start_dir (default: cwd).

        Returns:
            The absolute path to the file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir or os.getcwd())
        while True:
            pyfv_paths = [
                os.path.join(current_dir, '.pyfv.toml'),
                os.path.join(current_dir, 'pyfv.toml'),
            ]
            for pyfv_path in pyfv_paths:
                if os.path.exists(pyfv_path):
                    return os.path.abspath(pyfv_path)

            parent_dir = os.path.dirname(current_dir)

            # If we have reached the root directory, stop searching
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pyfv_toml()) is None:
            filepath = find_pyfv_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pyfv := _config.get('pyfv'):
                if settings := _pyfv.get('settings'):
                    VectorSettings.set(**settings)
                else:
                    if not suppress_warnings:
                        log.warning("Config has no `pyfv.settings` section")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pyfv` section")

    log.debug("VectorSettings load success")


def _basic_config(filename: Optional[str] = None,
                  settings: Optional[Mapping[str, Union[int, float]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load vector settings from file or Mapping.

    Args:
        filename: Configuration file path
        settings: Mapping of VectorSettings attributes
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and settings are provided
    """
    if filename and settings:
        raise ValueError("Can't use settings and config file at same time")
    if not filename and settings:
        VectorSettings.set(**settings)
    else:
        # trying to load definitions from pyfv.toml
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()


from .exceptions import (VectorTypeError, InvalidArityError, ScalarTypeError,
                         UnsupportedOperationError, DimensionMismatchError)
from .logger import logger, enable_file_logging, disable_file_logging
from .vector import FixedVector, Vector3, Vector2d, Vector3d, vector_type, dot, cross

__all__ = [
    'FixedVector',
    'Vector3',
    'Vector2d',
    'Vector3d',
    'vector_type',
    'dot',
    'cross',
    'VectorTypeError',
    'InvalidArityError',
    'ScalarTypeError',
    'UnsupportedOperationError',
    'DimensionMismatchError',
    'VectorSettings',
    'logger',
    'enable_file_logging',
    'disable_file_logging',
    'basicConfig',
]
