import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer

logger = logging.getLogger(__name__)

WIRE_FIELDS = ("result", "columns", "ms")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON.")


def _decode_bytes(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return {key: _decode_bytes(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_decode_bytes(item) for item in value]
    return value


class QueryResultShapeError(ValueError):
    pass


class QueryResult(BaseModel):
    """Materialized outcome of one query execution.

    Fields hold whatever the producer supplied, verbatim. A key missing from
    the source leaves its field as ``None``; use ``is_set`` to tell that apart
    from an explicit null. Nothing here checks that rows line up with
    ``columns`` or that ``ms`` is a number. Consumers that need those
    guarantees call ``check_shape()``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    result: Any = None
    columns: Any = None
    ms: Any = None

    @classmethod
    def from_dict(cls, source: Mapping[str, Any]) -> "QueryResult":
        if not isinstance(source, Mapping):
            raise TypeError(
                f"QueryResult source must be a mapping, got {type(source).__name__}."
            )
        return cls.model_validate({key: source[key] for key in WIRE_FIELDS if key in source})

    @classmethod
    def from_json(cls, payload: str | bytes | bytearray) -> "QueryResult":
        try:
            source = json.loads(payload, parse_constant=_reject_constant)
        except ValueError as exc:
            logger.debug("Rejected malformed query result payload: %s", exc)
            raise
        return cls.from_dict(source)

    def is_set(self, name: str) -> bool:
        if name not in WIRE_FIELDS:
            raise KeyError(name)
        return name in self.model_fields_set

    @property
    def row_count(self) -> int | None:
        if self.result is None:
            return None
        return len(self.result)

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in WIRE_FIELDS}

    def to_json(self, indent: int | None = None) -> str:
        # bytes -> utf-8 text, datetime -> ISO 8601, Decimal/UUID -> str
        return self.model_dump_json(indent=indent)

    @field_serializer("result", when_used="json")
    def serialize_rows(self, rows: Any) -> Any:
        # invalid utf-8 becomes U+FFFD instead of failing the dump
        return _decode_bytes(rows)

    def check_shape(self) -> "QueryResult":
        """Raise QueryResultShapeError unless rows, columns and timing agree.

        Sequence rows must have one value per column; mapping rows must be
        keyed by exactly the column names. Unset fields are skipped.
        """
        columns = self.columns
        rows = self.result

        if columns is not None:
            if not isinstance(columns, (list, tuple)):
                raise QueryResultShapeError(
                    f"columns must be a list, got {type(columns).__name__}."
                )
            for position, name in enumerate(columns):
                if not isinstance(name, str):
                    raise QueryResultShapeError(
                        f"Column {position} name must be a string, got {type(name).__name__}."
                    )

        if rows is not None and not isinstance(rows, (list, tuple)):
            raise QueryResultShapeError(f"result must be a list, got {type(rows).__name__}.")

        if self.ms is not None:
            if isinstance(self.ms, bool) or not isinstance(self.ms, (int, float)):
                raise QueryResultShapeError(f"ms must be a number, got {type(self.ms).__name__}.")
            if self.ms < 0:
                raise QueryResultShapeError(f"ms must not be negative, got {self.ms}.")

        if columns is None or rows is None:
            return self

        width = len(columns)
        expected_keys = set(columns)
        for index, row in enumerate(rows):
            if isinstance(row, Mapping):
                if set(row) != expected_keys:
                    raise QueryResultShapeError(
                        f"Row {index} keys {list(row)} do not match columns {list(columns)}."
                    )
            elif isinstance(row, (list, tuple)):
                if len(row) != width:
                    raise QueryResultShapeError(
                        f"Row {index} has {len(row)} values, expected {width}."
                    )
            else:
                raise QueryResultShapeError(
                    f"Row {index} must be a sequence or mapping, got {type(row).__name__}."
                )
        return self
