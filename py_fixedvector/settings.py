"""Global settings of the py_fixedvector library"""
import math
from dataclasses import dataclass, fields, MISSING
from numbers import Real
from typing import Union

from py_fixedvector.logger import logger

__all__ = ('VectorSettings',)


class VectorSettingsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class VectorSettings(metaclass=VectorSettingsMeta):
    """Process-wide settings read by vector formatting and approximate comparison.

    Defaults:
        * precision: 6 decimals for float components in `str(vector)`, as C `%f` renders them
        * rel_tol: 1e-9, default relative tolerance of `FixedVector.isclose`
        * abs_tol: 1e-12, default absolute tolerance of `FixedVector.isclose`

    Examples:
        >>> VectorSettings.precision = 3
        >>> VectorSettings.restore_defaults()
        >>> VectorSettings.set(precision=2, abs_tol=1e-6)
    """

    precision: int = 6
    rel_tol: float = 1e-9
    abs_tol: float = 1e-12

    @classmethod
    def restore_defaults(cls):
        """Reset all settings to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def set(cls, **kwargs: Union[int, float]):
        """Set settings from keyword arguments.

        Unknown attributes or invalid values are logged as warnings and skipped.
        """
        for attribute, value in kwargs.items():
            if not hasattr(VectorSettings, attribute):
                logger.warning(f"{attribute=} not found in settings")
            elif isinstance(value, bool) or not isinstance(value, Real) \
                    or not math.isfinite(value) or value < 0:
                logger.warning(f"{value=} is not a valid value for {attribute}")
            elif attribute == 'precision':
                if int(value) != value:
                    logger.warning(f"{value=} is not a valid value for {attribute}")
                else:
                    setattr(VectorSettings, attribute, int(value))
            else:
                setattr(VectorSettings, attribute, float(value))
