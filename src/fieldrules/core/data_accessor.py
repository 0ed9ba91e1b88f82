"""
DataAccessor - presence checks and value lookups over the data being validated.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from fieldrules.core.exceptions import ValidationError
from fieldrules.core.messages import get_messages

_MISSING = object()


class DataAccessor:
    """
    Reads fields from a mapping, a sequence or a plain object.

    Field identifiers are keys, indices or attribute names. A string containing
    dots ("user.address.city") walks nested data one segment at a time.
    A string that spells an integer ("0") also matches an integer key or a
    sequence index, so rules declared in YAML can address list items, and an
    integer field also matches the equivalent string key.
    On objects, private names and callables (methods) are never fields.
    """

    def __init__(self, data: Any):
        """
        Initialize accessor.

        Args:
            data: Mapping, sequence (not str/bytes) or object to read from
        """
        self._data = data

    @property
    def data(self) -> Any:
        return self._data

    def has_field(self, field: str | int) -> bool:
        return self._lookup(field) is not _MISSING

    def get_field(self, field: str | int) -> Any:
        """
        Get a field's value.

        Raises:
            ValidationError: If the field does not exist
        """
        value = self._lookup(field)
        if value is _MISSING:
            raise ValidationError(
                rule_name="exists",
                field_name=field,
                message=get_messages().get("field_does_not_exist", field),
            )
        return value

    def get_field_or_default(self, field: str | int, default: Any = None) -> Any:
        value = self._lookup(field)
        return default if value is _MISSING else value

    def _lookup(self, field: str | int) -> Any:
        if isinstance(field, str) and "." in field:
            carry = self._data
            for subfield in field.split("."):
                carry = self._get_subfield(carry, subfield)
                if carry is _MISSING:
                    return _MISSING
            return carry
        return self._get_subfield(self._data, field)

    @staticmethod
    def _get_subfield(value: Any, field: str | int) -> Any:
        if isinstance(value, Mapping):
            if field in value:
                return value[field]
            if isinstance(field, str) and _is_index(field) and int(field) in value:
                return value[int(field)]
            if isinstance(field, int) and not isinstance(field, bool) and str(field) in value:
                return value[str(field)]
            return _MISSING

        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            if isinstance(field, str) and _is_index(field):
                field = int(field)
            if isinstance(field, int) and not isinstance(field, bool) and 0 <= field < len(value):
                return value[field]
            return _MISSING

        if value is None or isinstance(value, (str, bytes, bytearray, int, float, bool)):
            return _MISSING

        if not isinstance(field, str) or field == "" or field.startswith("_"):
            return _MISSING
        attribute = getattr(value, field, _MISSING)
        if callable(attribute):
            return _MISSING
        return attribute


def _is_index(field: str) -> bool:
    return field.isascii() and field.isdigit() and (field == "0" or not field.startswith("0"))
