from __future__ import annotations

import typing


class InvalidArgumentError(TypeError):
    """Argument passed to a route does not satisfy its capability check."""

    position: typing.Literal["first", "second"]
    expected: str

    def __init__(
        self,
        position: typing.Literal["first", "second"],
        expected: str,
        message: str,
    ) -> None:
        self.position = position
        self.expected = expected
        super().__init__(message)

    @classmethod
    def source(cls, *, allow_async: bool) -> InvalidArgumentError:
        """First argument is not iterable (or async iterable)."""
        expected = '"iterable" or "asyncIterable"' if allow_async else '"iterable"'
        return cls(
            "first",
            expected,
            f"Argument type mismatch: The first argument is expected to be {expected}.",
        )

    @classmethod
    def action(cls, received: str) -> InvalidArgumentError:
        """Second argument is not callable."""
        return cls(
            "second",
            '"function"',
            "Argument type mismatch: The second argument is expected to be "
            f'a "function", but received "{received}".',
        )


__all__ = ("InvalidArgumentError",)
