from __future__ import annotations
import pytest

from helpers_br.utils.lists import (
    sort_by, order_by, group_by, chunk, get_nested_value, set_nested_value,
    if_null, if_null_or_empty,
)

PESSOAS = [
    {"nome": "Érica", "uf": "PA", "idade": 30},
    {"nome": "ana", "uf": "AM", "idade": 25},
    {"nome": "Bruno", "uf": "PA", "idade": 41},
]

def test_sort_by_accent_and_case_insensitive():
    nomes = [p["nome"] for p in sorted(PESSOAS, key=sort_by("nome"))]
    assert nomes == ["ana", "Bruno", "Érica"]

def test_sort_by_multiple_and_descending():
    res = sorted(PESSOAS, key=sort_by(["-uf", "nome"]))
    assert [p["nome"] for p in res] == ["Bruno", "Érica", "ana"]

def test_order_by():
    assert [p["idade"] for p in order_by(PESSOAS, "idade")] == [25, 30, 41]
    assert [p["idade"] for p in order_by(PESSOAS, "idade", "desc")] == [41, 30, 25]
    with pytest.raises(ValueError):
        order_by(PESSOAS, "idade", "up")

def test_group_by_and_chunk():
    g = group_by(PESSOAS, lambda p: p["uf"])
    assert sorted(g) == ["AM", "PA"] and len(g["PA"]) == 2
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    with pytest.raises(ValueError):
        chunk([1], 0)

def test_nested_values():
    obj = {"a": {"b": [10, {"c": "ok"}]}}
    assert get_nested_value(obj, "a.b.0") == 10
    assert get_nested_value(obj, "a.b[1].c") == "ok"
    assert get_nested_value(obj, "a.x.y") is None
    assert get_nested_value(obj, "a.b.9", default="-") == "-"

    target: dict = {}
    set_nested_value(target, "perfil.docs[0].tipo", "cpf")
    set_nested_value(target, "perfil.nome", "Ana")
    assert target == {"perfil": {"docs": [{"tipo": "cpf"}], "nome": "Ana"}}
    with pytest.raises(ValueError):
        set_nested_value(target, "  ", 1)

def test_set_nested_value_rejects_bad_segments():
    alvo = {"a": [1], "b": 2}
    with pytest.raises(ValueError):
        set_nested_value(alvo, "a.x", 5)
    with pytest.raises(ValueError):
        set_nested_value(alvo, "b.c", 5)
    assert alvo == {"a": [1], "b": 2}
    set_nested_value(alvo, "a[2]", 3)
    assert alvo["a"] == [1, None, 3]

def test_null_helpers():
    assert if_null(None, 5) == 5 and if_null(0, 5) == 0
    assert if_null_or_empty(None, "", "  ", [], {}, "x") == "x"
    assert if_null_or_empty(None, "") is None
