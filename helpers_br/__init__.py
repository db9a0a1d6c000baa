from .extenso import (
    OutOfRangeError,
    check_range,
    split_triads,
    convert_hundreds,
    compose_scales,
    convert_to_words,
)

__version__ = "1.0.0"

__all__ = [
    "OutOfRangeError",
    "check_range",
    "split_triads",
    "convert_hundreds",
    "compose_scales",
    "convert_to_words",
]
