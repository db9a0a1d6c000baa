from .config import settings, set_settings, setting
from .cache import memoize, MemoryStore
from .text import (
    normalize, strip_accents, tokenize, slugify, only_numbers, title_case,
    mask_it, mask_it_parts, truncate, interpolate, to_bool, safe_int, safe_float,
)
from .numbers import (
    is_numeric, to_number, is_odd, is_even,
    format_currency, format_number, abbreviate_number, pad_zeros_by_ref,
)
from .dates import (
    utcnow_iso, parse_date, format_date, date_parts,
    is_date, is_date_between, is_leap_year, months, weekdays,
)
from .validators_br import (
    is_valid_cpf, is_valid_cnpj, is_valid_cep,
    format_cpf, format_cnpj, format_cep, format_telefone,
    gerar_cpf, gerar_cnpj,
)
from .checks import (
    equals, null_or_empty, is_object, is_function, is_awaitable,
    is_email, is_uuid, is_url, is_json,
)
from .lists import (
    sort_by, order_by, group_by, chunk, get_nested_value, set_nested_value,
    if_null, if_null_or_empty, generate_uuid4,
)
from .functional import debounce, throttle, once, pipe, compose, retry, sleep
from .cryptor import (
    hash_text, compare_hash, generate_salt, hash_password, verify_password,
    generate_key, encrypt, decrypt, KeyPair, generate_key_pair, sign, verify,
)

__all__ = [
    "settings", "set_settings", "setting",
    "memoize", "MemoryStore",
    "normalize", "strip_accents", "tokenize", "slugify", "only_numbers", "title_case",
    "mask_it", "mask_it_parts", "truncate", "interpolate", "to_bool", "safe_int", "safe_float",
    "is_numeric", "to_number", "is_odd", "is_even",
    "format_currency", "format_number", "abbreviate_number", "pad_zeros_by_ref",
    "utcnow_iso", "parse_date", "format_date", "date_parts",
    "is_date", "is_date_between", "is_leap_year", "months", "weekdays",
    "is_valid_cpf", "is_valid_cnpj", "is_valid_cep",
    "format_cpf", "format_cnpj", "format_cep", "format_telefone",
    "gerar_cpf", "gerar_cnpj",
    "equals", "null_or_empty", "is_object", "is_function", "is_awaitable",
    "is_email", "is_uuid", "is_url", "is_json",
    "sort_by", "order_by", "group_by", "chunk", "get_nested_value", "set_nested_value",
    "if_null", "if_null_or_empty", "generate_uuid4",
    "debounce", "throttle", "once", "pipe", "compose", "retry", "sleep",
    "hash_text", "compare_hash", "generate_salt", "hash_password", "verify_password",
    "generate_key", "encrypt", "decrypt", "KeyPair", "generate_key_pair", "sign", "verify",
]
