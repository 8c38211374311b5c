from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..config import RenderSettings, DEFAULT_SETTINGS


class _Missing:
    """
    Marker returned by Record.get() for a field the row does not hold.
    Renders and compares as the default null text ("null"). Relations built
    with a custom RenderSettings.null_text render through Record.get_text(),
    which applies their settings; str(MISSING) always gives the default.
    """
    _instance: Optional["_Missing"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __str__(self):
        return DEFAULT_SETTINGS.null_text

    def __eq__(self, other):
        return other is self or other == DEFAULT_SETTINGS.null_text

    def __hash__(self):
        return hash(DEFAULT_SETTINGS.null_text)

    def __bool__(self):
        return False


MISSING = _Missing()

Value = Union[str, _Missing]


class Record:
    """
    One row: an unordered mapping of field name to string value.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = {}
        if values:
            for name, value in values.items():
                self.set(name, value)

    def get(self, name: str) -> Value:
        return self._data.get(name, MISSING)

    def get_text(self, name: str, settings: RenderSettings = DEFAULT_SETTINGS) -> str:
        value = self._data.get(name)
        return settings.null_text if value is None else value

    def set(self, name: str, value: str) -> None:
        self._data[name] = value

    def field_count(self) -> int:
        return len(self._data)

    def copy(self) -> "Record":
        return Record(self._data)

    def render_ordered(self, names: List[str], settings: RenderSettings = DEFAULT_SETTINGS) -> str:
        parts: List[str] = []
        for name in names:
            value = self.get_text(name, settings)
            padding = max(len(name) - len(value) + settings.cell_gap, 0)
            parts.append(value + " " * padding)
        return "".join(parts).strip()

    def render_csv(self, names: List[str], settings: RenderSettings = DEFAULT_SETTINGS) -> str:
        return settings.delimiter.join(self.get_text(name, settings) for name in names)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self):
        return f"Record({self._data!r})"
