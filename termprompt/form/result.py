from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional

FormValue = Any


class FormResult(Mapping[str, FormValue]):
    """Answers collected by a form, in the order the fields ran.

    Skipped fields leave no entry. The typed getters never raise: a missing
    or mistyped key yields ``""``, ``False``, ``0``, ``[]`` or ``None``.
    """

    def __init__(self, values: Optional[Mapping[str, FormValue]] = None) -> None:
        self._values: dict[str, FormValue] = dict(values or {})

    def __getitem__(self, key: str) -> FormValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FormResult({self._values!r})"

    def set(self, key: str, value: FormValue) -> None:
        self._values[key] = value

    def get_string(self, key: str) -> str:
        if key not in self._values:
            return ""
        value = self._values[key]
        if isinstance(value, str):
            return value
        return str(value)

    def get_bool(self, key: str) -> bool:
        value = self._values.get(key)
        return value if isinstance(value, bool) else False

    def get_int(self, key: str) -> int:
        value = self._values.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0

    def get_int_list(self, key: str) -> list[int]:
        value = self._values.get(key)
        if isinstance(value, list):
            return list(value)
        return []

    def get_form(self, key: str) -> Optional["FormResult"]:
        value = self._values.get(key)
        return value if isinstance(value, FormResult) else None

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict, e.g. for JSON output."""
        data: dict[str, Any] = {}
        for key, value in self._values.items():
            data[key] = value.to_dict() if isinstance(value, FormResult) else value
        return data
