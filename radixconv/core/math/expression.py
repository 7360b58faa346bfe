"""
Base Functions — безопасные функции основания для смешанных систем

Функция основания задаётся строкой: целочисленное выражение Python от
переменной n (позиция цифры, 0 — младшая), например "n + 2" или
"prime(n)". Выражение разбирается в AST и проверяется по белому списку
узлов; имена и вызовы за пределами списка отвергаются при компиляции.

Именованные пресеты:
- factorial: n + 2      (факториальная система: 2, 3, 4, ...)
- primorial: prime(n)   (примориальная система: 2, 3, 5, 7, ...)
- fibonacci: fib(n + 3) (2, 3, 5, 8, ...)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вычисление детерминировано и без побочных эффектов
2. Только целочисленная арифметика (деление — только //)
3. Показатель степени ограничен MAX_EXPONENT
"""

import ast
import math
from typing import Callable, Dict, Final, Optional

from radixconv.core.errors import ConfigurationError

# Ограничение показателя степени: 2 ** MAX_EXPONENT уже ~125 КБ цифр
MAX_EXPONENT: Final[int] = 100_000

POSITION_VARIABLE: Final[str] = "n"


# =============================================================================
# HELPERS
# =============================================================================


def nth_prime(index: int) -> int:
    """
    index-е простое число, начиная с prime(0) = 2.

    Examples:
        >>> [nth_prime(i) for i in range(6)]
        [2, 3, 5, 7, 11, 13]
    """
    if index < 0:
        raise ValueError(f"prime index must be non-negative, got {index}")
    if index < 6:
        return (2, 3, 5, 7, 11, 13)[index]

    # Верхняя граница p_n < n (ln n + ln ln n) для n >= 6 (индекс с единицы)
    count = index + 1
    limit = int(count * (math.log(count) + math.log(math.log(count)))) + 1
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for candidate in range(2, math.isqrt(limit) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate::candidate] = bytearray(
                len(range(candidate * candidate, limit + 1, candidate))
            )
    seen = -1
    for number, flag in enumerate(sieve):
        if flag:
            seen += 1
            if seen == index:
                return number
    raise ArithmeticError(f"sieve bound too small for prime index {index}")


def fibonacci(index: int) -> int:
    """fib(0) = 0, fib(1) = 1, ..."""
    if index < 0:
        raise ValueError(f"fibonacci index must be non-negative, got {index}")
    a, b = 0, 1
    for _ in range(index):
        a, b = b, a + b
    return a


def _factorial(value: int) -> int:
    return math.factorial(value)


ALLOWED_FUNCTIONS: Final[Dict[str, Callable[..., int]]] = {
    "factorial": _factorial,
    "prime": nth_prime,
    "fib": fibonacci,
    "abs": abs,
    "min": min,
    "max": max,
}

ALLOWED_NODES: Final[frozenset] = frozenset(
    {
        ast.Expression,
        ast.BinOp,
        ast.UnaryOp,
        ast.BoolOp,
        ast.Compare,
        ast.IfExp,
        ast.Call,
        ast.Name,
        ast.Load,
        ast.Constant,
        ast.Add,
        ast.Sub,
        ast.Mult,
        ast.FloorDiv,
        ast.Mod,
        ast.Pow,
        ast.USub,
        ast.UAdd,
        ast.Not,
        ast.And,
        ast.Or,
        ast.Eq,
        ast.NotEq,
        ast.Lt,
        ast.LtE,
        ast.Gt,
        ast.GtE,
    }
)


# =============================================================================
# COMPILATION
# =============================================================================


class _PowerGuard(ast.NodeTransformer):
    """Заменяет a ** b на вызов _pow(a, b) с проверкой показателя."""

    def visit_BinOp(self, node: ast.BinOp) -> ast.AST:
        self.generic_visit(node)
        if isinstance(node.op, ast.Pow):
            call = ast.Call(
                func=ast.Name(id="_pow", ctx=ast.Load()),
                args=[node.left, node.right],
                keywords=[],
            )
            return ast.copy_location(call, node)
        return node


def _guarded_pow(base: int, exponent: int) -> int:
    if exponent < 0:
        raise ValueError("negative exponents are not allowed")
    if exponent > MAX_EXPONENT and abs(base) > 1:
        raise ValueError(f"exponent {exponent} exceeds limit {MAX_EXPONENT}")
    return base ** exponent


def _validate_tree(tree: ast.AST, source: str) -> None:
    for node in ast.walk(tree):
        if type(node) not in ALLOWED_NODES:
            raise ConfigurationError(
                f"Unsupported syntax {type(node).__name__} in base function {source!r}"
            )
        if isinstance(node, ast.Constant) and (
            isinstance(node.value, bool) or not isinstance(node.value, int)
        ):
            raise ConfigurationError(f"Only integer constants allowed in {source!r}")
        if isinstance(node, ast.Name) and node.id != POSITION_VARIABLE:
            if node.id not in ALLOWED_FUNCTIONS:
                raise ConfigurationError(f"Unknown name {node.id!r} in base function {source!r}")
        if isinstance(node, ast.Call):
            if not isinstance(node.func, ast.Name) or node.func.id not in ALLOWED_FUNCTIONS:
                raise ConfigurationError(f"Unsupported call in base function {source!r}")
            if node.keywords:
                raise ConfigurationError(f"Keyword arguments not allowed in {source!r}")


class ExpressionBaseFunction:
    """
    Функция основания из целочисленного выражения от n.

    Examples:
        >>> f = ExpressionBaseFunction("n + 2")
        >>> f(0), f(3)
        (2, 5)
    """

    def __init__(self, source: str):
        self.source = source.strip()
        if not self.source:
            raise ConfigurationError("Base function expression is empty")
        try:
            tree = ast.parse(self.source, mode="eval")
        except SyntaxError as exc:
            raise ConfigurationError(f"Invalid base function {source!r}: {exc.msg}") from exc

        _validate_tree(tree, self.source)
        tree = ast.fix_missing_locations(_PowerGuard().visit(tree))
        self._code = compile(tree, "<base function>", "eval")
        self._globals = {"__builtins__": {}, "_pow": _guarded_pow, **ALLOWED_FUNCTIONS}

    def __call__(self, position: int) -> int:
        return eval(self._code, self._globals, {POSITION_VARIABLE: position})

    def __repr__(self) -> str:
        return f"ExpressionBaseFunction({self.source!r})"


# =============================================================================
# PRESETS
# =============================================================================


BASE_FUNCTION_PRESETS: Final[Dict[str, str]] = {
    "factorial": "n + 2",
    "primorial": "prime(n)",
    "fibonacci": "fib(n + 3)",
}


def resolve_base_function(reference: str) -> ExpressionBaseFunction:
    """
    Функция основания по имени пресета или по выражению.

    Raises:
        ConfigurationError: Если выражение некорректно
    """
    expression: Optional[str] = BASE_FUNCTION_PRESETS.get(reference.strip())
    return ExpressionBaseFunction(expression if expression is not None else reference)
