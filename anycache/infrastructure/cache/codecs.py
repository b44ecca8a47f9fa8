"""JSON codec for cache entries.

Stores one value per file as UTF-8 JSON. Plain JSON values (dicts, lists,
strings, numbers, booleans, None) round-trip as-is. Dataclass value types
are converted with ``dataclasses.asdict`` and rebuilt with ``cls(**obj)``
unless explicit hooks are supplied.
"""

import dataclasses
import json
from typing import Any, Callable, Optional, Type, TypeVar

from anycache.domain.errors import EntryDecodeError, EntryEncodeError
from anycache.domain.interfaces.codec import Codec

T = TypeVar("T")

ENCODING = "utf-8"


class JsonCodec(Codec[T]):
    """Codec that serializes values to JSON bytes."""

    def __init__(
        self,
        value_type: Optional[Type[T]] = None,
        to_primitive: Optional[Callable[[T], Any]] = None,
        from_primitive: Optional[Callable[[Any], T]] = None,
        indent: Optional[int] = None,
    ):
        """Initializes the codec.

        Args:
            value_type: Optional type of the cached values. Dataclass types get
                default conversion hooks.
            to_primitive: Converts a value into JSON-serializable data.
            from_primitive: Rebuilds a value from decoded JSON data.
            indent: Indentation passed to ``json.dumps`` (compact if None).
        """
        self.value_type = value_type
        self.indent = indent

        if value_type is not None and dataclasses.is_dataclass(value_type):
            to_primitive = to_primitive or dataclasses.asdict
            from_primitive = from_primitive or (lambda obj: value_type(**obj))
        self._to_primitive = to_primitive
        self._from_primitive = from_primitive

    def encode(self, value: T) -> bytes:
        try:
            data = self._to_primitive(value) if self._to_primitive else value
            return json.dumps(data, ensure_ascii=False, indent=self.indent).encode(ENCODING)
        except (TypeError, ValueError, RecursionError) as e:
            # TypeError: not serializable, ValueError: circular reference, RecursionError: nesting too deep
            raise EntryEncodeError(
                f"Cannot encode value as JSON: {e}",
                {"value_type": type(value).__name__},
            ) from e

    def decode(self, data: bytes) -> T:
        try:
            obj = json.loads(data.decode(ENCODING))
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and oversized integer literals
            raise EntryDecodeError(f"Malformed JSON entry: {e}") from e

        if self._from_primitive is None:
            return obj
        try:
            return self._from_primitive(obj)
        except (TypeError, ValueError, KeyError, RecursionError) as e:
            type_name = self.value_type.__name__ if self.value_type else "value"
            raise EntryDecodeError(f"Cannot rebuild {type_name} from JSON: {e}") from e
