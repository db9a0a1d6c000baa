from __future__ import annotations
import numbers
from typing import List, Sequence

# ---------------- Tabelas léxicas ----------------

UNIDADES = ("zero", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove")
# indexada pelo dígito da unidade (11 -> 1)
DEZ_A_DEZENOVE = ("", "onze", "doze", "treze", "quatorze", "quinze", "dezesseis", "dezessete", "dezoito", "dezenove")
DEZENAS = ("", "dez", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa")
CENTENAS = ("", "cento", "duzentos", "trezentos", "quatrocentos", "quinhentos",
            "seiscentos", "setecentos", "oitocentos", "novecentos")

# (singular, plural) por posição da tríade
ESCALAS = (
    ("", ""),
    ("mil", "mil"),
    ("milhão", "milhões"),
    ("bilhão", "bilhões"),
    ("trilhão", "trilhões"),
    ("quatrilhão", "quatrilhões"),
)

LIMITE = 1000 ** len(ESCALAS)


class OutOfRangeError(ValueError):
    """Valor fora do intervalo suportado (0 a 999.999.999.999.999.999)."""

    def __init__(self, value: int):
        self.value = value
        super().__init__("O valor deve estar entre 0 e 999.999.999.999.999.999")


# ---------------- Etapas ----------------

def check_range(value: int) -> None:
    if value < 0 or value >= LIMITE:
        raise OutOfRangeError(value)


def split_triads(value: int) -> List[int]:
    """
    Quebra o valor em 6 grupos de 3 dígitos (base 1000).
    Índice 0 = unidades, índice 5 = quatrilhões.
    """
    return [(value // 1000 ** i) % 1000 for i in range(len(ESCALAS))]


def convert_hundreds(triad: int) -> str:
    """
    Converte uma tríade (0..999) em palavras. Retorna "" para 0.

    >>> convert_hundreds(123)
    'cento e vinte e três'
    """
    if not 0 <= triad < 1000:
        raise ValueError(f"Tríade fora de 0..999: {triad}")
    if triad == 0:
        return ""
    if triad == 100:
        return "cem"

    centena, dezena, unidade = triad // 100, (triad % 100) // 10, triad % 10
    partes: List[str] = []
    if centena:
        partes.append(CENTENAS[centena])
    if dezena == 1 and unidade:
        partes.append(DEZ_A_DEZENOVE[unidade])
    else:
        if dezena:
            partes.append(DEZENAS[dezena])
        if unidade:
            partes.append(UNIDADES[unidade])
    return " e ".join(partes)


def compose_scales(triads: Sequence[int]) -> str:
    """
    Percorre as tríades da maior para a menor escala, anexando o nome da escala
    (singular/plural) e os conectivos. Grupos seguintes < 101 entram com "e".
    """
    result = ""
    for i in reversed(range(len(ESCALAS))):
        triad = triads[i]
        if triad == 0:
            continue
        if result:
            result += " e " if triad < 101 else " "

        # "mil", nunca "um mil"
        if i == 1 and triad == 1:
            result += "mil"
            continue

        singular, plural = ESCALAS[i]
        nome = plural if i >= 2 and triad > 1 else singular
        result += f"{convert_hundreds(triad)} {nome}"

    return " ".join(result.split())


# ---------------- API pública ----------------

def convert_to_words(value: int) -> str:
    """
    Escreve um inteiro não negativo por extenso, em português.

    >>> convert_to_words(1234567)
    'um milhão duzentos e trinta e quatro mil quinhentos e sessenta e sete'

    Levanta TypeError para valores não inteiros e OutOfRangeError fora de
    0..999.999.999.999.999.999.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Valor deve ser inteiro, recebido {type(value).__name__}")
    value = int(value)
    check_range(value)
    if value == 0:
        return UNIDADES[0]
    return compose_scales(split_triads(value))
