from __future__ import annotations

__all__ = (
    "InvalidArgumentError",
    "InvalidKeyTypeError",
    "KeyNotFoundError",
    "NullKeyError",
    "PrefixDictError",
    "ensure_key",
)


class PrefixDictError(Exception): ...


class InvalidArgumentError(PrefixDictError, TypeError):
    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class NullKeyError(InvalidArgumentError):
    def __init__(self, name: str = "key") -> None:
        super().__init__(name, f"{name.capitalize()} cannot be None.")


class InvalidKeyTypeError(InvalidArgumentError):
    def __init__(self, name: str, received: object) -> None:
        self.received = received
        super().__init__(name, f"{name.capitalize()} must be a str, not {type(received).__name__}.")


class KeyNotFoundError(PrefixDictError, KeyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No item with the key {self.key!r} has been found."


def ensure_key(key: object, name: str = "key") -> str:
    if key is None:
        raise NullKeyError(name) from None
    if not isinstance(key, str):
        raise InvalidKeyTypeError(name, key) from None
    return key
