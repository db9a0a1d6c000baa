from __future__ import annotations
import logging
import time
from functools import reduce, wraps
from threading import Lock, Timer
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

log = logging.getLogger(__name__)

# ---------------- Temporizadores ----------------

def debounce(fn: Callable[..., Any], wait: float) -> Callable[..., None]:
    """
    Adia a chamada até `wait` segundos sem novas invocações; só a última roda.
    A função retornada tem .cancel().
    """
    lock = Lock()
    timer: Optional[Timer] = None

    @wraps(fn)
    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal timer
        with lock:
            if timer is not None:
                timer.cancel()
            timer = Timer(wait, fn, args=args, kwargs=kwargs)
            timer.daemon = True
            timer.start()

    def cancel() -> None:
        with lock:
            if timer is not None:
                timer.cancel()

    debounced.cancel = cancel  # type: ignore[attr-defined]
    return debounced

def throttle(fn: Callable[..., T], wait: float) -> Callable[..., Optional[T]]:
    """
    Executa no máximo uma vez a cada `wait` segundos.
    Chamadas dentro da janela agendam uma execução final com os últimos argumentos
    e devolvem o resultado anterior.
    """
    lock = Lock()
    state: dict = {"last_run": float("-inf"), "result": None, "timer": None}

    def _trailing(args: tuple, kwargs: dict) -> None:
        result = fn(*args, **kwargs)
        with lock:
            state["last_run"] = time.monotonic()
            state["result"] = result
            state["timer"] = None

    @wraps(fn)
    def throttled(*args: Any, **kwargs: Any) -> Optional[T]:
        now = time.monotonic()
        with lock:
            if state["timer"] is not None:
                state["timer"].cancel()
                state["timer"] = None
            elapsed = now - state["last_run"]
            if elapsed < wait:
                t = Timer(wait - elapsed, _trailing, args=(args, kwargs))
                t.daemon = True
                state["timer"] = t
                t.start()
                return state["result"]
            state["last_run"] = now
        result = fn(*args, **kwargs)
        with lock:
            state["result"] = result
        return result

    return throttled

# ---------------- Composição ----------------

def once(fn: Callable[..., T]) -> Callable[..., T]:
    """Executa fn só na primeira chamada; as seguintes devolvem o mesmo resultado."""
    lock = Lock()
    state: dict = {"called": False, "result": None}

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        with lock:
            if not state["called"]:
                state["result"] = fn(*args, **kwargs)
                state["called"] = True
        return state["result"]

    return wrapper

def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """pipe(f, g, h)(x) == h(g(f(x)))"""
    if not fns:
        raise ValueError("Nenhuma função informada para pipe")
    if len(fns) == 1:
        return fns[0]
    return lambda x: reduce(lambda acc, f: f(acc), fns, x)

def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose(f, g, h)(x) == f(g(h(x)))"""
    if not fns:
        raise ValueError("Nenhuma função informada para compose")
    return pipe(*reversed(fns))

# ---------------- Espera e repetição ----------------

def sleep(seconds: float) -> None:
    if seconds is None or seconds != seconds or seconds < 0:
        raise ValueError("seconds deve ser maior ou igual a 0")
    time.sleep(seconds)

def retry(
    fn: Callable[[], T],
    retries: int = 3,
    delay: float = 1.0,
    on_retry: Optional[Callable[[Exception, int], None]] = None,
) -> T:
    """
    Chama fn até `retries` vezes, esperando `delay` segundos entre tentativas.
    Na última falha, propaga a exceção original.
    """
    if retries < 1:
        raise ValueError("retries deve ser maior que 0")
    if delay is None or delay != delay or delay < 0:
        raise ValueError("delay deve ser maior ou igual a 0")

    for attempt in range(1, retries + 1):
        try:
            return fn()
        except Exception as e:
            if attempt == retries:
                raise
            log.warning(f"tentativa {attempt}/{retries} falhou: {e}")
            if on_retry is not None:
                on_retry(e, attempt)
            sleep(delay)
    raise RuntimeError("Tentativas esgotadas")
