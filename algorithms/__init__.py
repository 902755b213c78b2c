from .errors import InvalidInput, InvalidResult
from .math_tools import MathTools
from .weight_converter import WeightConverter
from .program_tables import MAIN_LIFT_TABLE, SECONDARY_LIFT_TABLE, FOUR_DAY_LAYOUT

__all__ = [
    "InvalidInput",
    "InvalidResult",
    "MathTools",
    "WeightConverter",
    "MAIN_LIFT_TABLE",
    "SECONDARY_LIFT_TABLE",
    "FOUR_DAY_LAYOUT",
]
