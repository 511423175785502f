"""A small typed accessor around JSON documents."""

from __future__ import annotations

import copy
import json
import os
from typing import Any


class NoValidJsonOrPathError(Exception):
    """Raised when a file cannot be read or does not hold valid JSON."""

    def __init__(self) -> None:
        super().__init__("No valid json or path given")


class ObjectOrTypeError(Exception):
    """Raised when a key is missing or its value has the wrong type."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Object not found or not of type {type_name}")
        self.type_name = type_name


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float))


class Json:
    """A JSON value with typed getters; values are copied in and out."""

    def __init__(self, data: Any = None) -> None:
        if data is None:
            data = {}
        self._data = copy.deepcopy(data.data if isinstance(data, Json) else data)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "Json":
        """Read a JSON document from a file."""
        try:
            with open(path, encoding="utf-8") as handle:
                return cls(json.load(handle))
        except (OSError, ValueError) as exc:
            raise NoValidJsonOrPathError() from exc

    @property
    def data(self) -> Any:
        return self._data

    def _value(self, name: str, type_name: str) -> Any:
        if not isinstance(self._data, dict) or name not in self._data:
            raise ObjectOrTypeError(type_name)
        return self._data[name]

    def get_string(self, name: str) -> str:
        value = self._value(name, "string")
        if not isinstance(value, str):
            raise ObjectOrTypeError("string")
        return value

    def get_int(self, name: str) -> int:
        value = self._value(name, "int")
        if not _is_number(value):
            raise ObjectOrTypeError("int")
        return int(value)

    def get_double(self, name: str) -> float:
        value = self._value(name, "double")
        if not _is_number(value):
            raise ObjectOrTypeError("double")
        return float(value)

    def get_bool(self, name: str) -> bool:
        value = self._value(name, "bool")
        if not isinstance(value, bool):
            raise ObjectOrTypeError("bool")
        return value

    def get_list(self, name: str) -> list["Json"]:
        value = self._value(name, "vector")
        if isinstance(value, dict):
            value = list(value.values())
        if not isinstance(value, list):
            raise ObjectOrTypeError("vector")
        return [Json(part) for part in value]

    def get_mapping(self) -> dict[str, "Json"]:
        if isinstance(self._data, dict):
            return {key: Json(value) for key, value in self._data.items()}
        if isinstance(self._data, list):
            return {str(index): Json(value) for index, value in enumerate(self._data)}
        raise ObjectOrTypeError("unordered_map")

    def get_string_list(self, name: str) -> list[str]:
        value = self._value(name, "string vector")
        if isinstance(value, dict):
            value = list(value.values())
        if not isinstance(value, list) or not all(isinstance(part, str) for part in value):
            raise ObjectOrTypeError("string vector")
        return list(value)

    def _object(self) -> dict[str, Any]:
        if self._data is None:
            self._data = {}
        if not isinstance(self._data, dict):
            raise ObjectOrTypeError("object")
        return self._data

    def set_string(self, key: str, value: str) -> None:
        self._object()[key] = value

    def set_int(self, key: str, value: int) -> None:
        self._object()[key] = value

    def get_object(self, key: str) -> "Json":
        """Return a copy of the value at ``key``, creating an empty object if it is empty."""
        target = self._object()
        if _empty(target.get(key)):
            target[key] = {}
        return Json(target[key])

    def set_object(self, key: str, other: "Json") -> None:
        self._object()[key] = copy.deepcopy(other.data)

    def is_empty(self) -> bool:
        return _empty(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Json):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Json({self._data!r})"

    def __str__(self) -> str:
        return json.dumps(self._data, indent=4, sort_keys=True, ensure_ascii=False)


def _empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list)) and not value)