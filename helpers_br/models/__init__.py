from .date_parts import DateParts

__all__ = [
    "DateParts",
]
