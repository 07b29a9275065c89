"""Name/arity dispatch table for functions exposed to style sheets."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from spritemapper.errors import UnknownFunctionError
from spritemapper.logging import get_logger

logger = get_logger("registry")


def normalize_name(name: str) -> str:
    """Style sheets treat ``sprite_url`` and ``sprite-url`` as the same name."""
    return name.replace("_", "-")


@dataclass(frozen=True)
class FunctionSignature:
    """One accepted call shape of a registered function."""

    name: str
    args: tuple[str, ...]
    func: Callable[..., Any]
    var_kwargs: bool = False

    @property
    def arity(self) -> int:
        return len(self.args)


class FunctionRegistry:
    """Maps ``(name, positional arity)`` to the Python callable to invoke."""

    def __init__(self) -> None:
        self._signatures: dict[tuple[str, int], FunctionSignature] = {}

    def register(
        self, name: str, *signatures: Sequence[str], var_kwargs: bool = False
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator registering a function under *name* for each signature.

        Args:
            name: Style-sheet function name (dashes or underscores).
            *signatures: Argument-name lists, one per accepted arity.
            var_kwargs: Whether calls may pass arbitrary keyword arguments.
        """
        key_name = normalize_name(name)

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            for args in signatures:
                sig = FunctionSignature(key_name, tuple(args), func, var_kwargs)
                self._signatures[(key_name, sig.arity)] = sig
            return func

        return decorator

    def lookup(self, name: str, arity: int) -> FunctionSignature:
        key = (normalize_name(name), arity)
        try:
            return self._signatures[key]
        except KeyError:
            raise UnknownFunctionError(
                f"No function {key[0]}() taking {arity} argument(s)"
            ) from None

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch a style-sheet function call.

        Raises:
            UnknownFunctionError: If no function matches the name and
                arity, or keyword arguments are passed to a function that
                does not take them.
        """
        sig = self.lookup(name, len(args))
        if kwargs and not sig.var_kwargs:
            raise UnknownFunctionError(
                f"{sig.name}() does not accept keyword arguments"
            )
        logger.debug("Calling %s/%d", sig.name, sig.arity, extra={"function": sig.name})
        return sig.func(*args, **kwargs)

    def __contains__(self, name: str) -> bool:
        key_name = normalize_name(name)
        return any(n == key_name for n, _ in self._signatures)

    def names(self) -> list[str]:
        return sorted({n for n, _ in self._signatures})

    def signatures(self, name: str) -> list[FunctionSignature]:
        key_name = normalize_name(name)
        return sorted(
            (s for (n, _), s in self._signatures.items() if n == key_name),
            key=lambda s: s.arity,
        )
