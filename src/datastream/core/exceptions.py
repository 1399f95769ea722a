from __future__ import annotations


class DataStreamError(Exception):
    """Базовая ошибка пакета datastream."""


class InvalidConfiguration(DataStreamError, ValueError):
    """page_size должен быть положительным целым числом."""


def validate_page_size(page_size: object) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise InvalidConfiguration(
            f"page_size must be a positive integer, got {page_size!r}"
        )
    if page_size <= 0:
        raise InvalidConfiguration(
            f"page_size must be a positive integer, got {page_size}"
        )
    return page_size
