"""
Reflective String Interface for Configuration Groups.

Every configuration group (the root group and each parameter set) is a
pydantic model whose fields carry their external config-file key as alias.
This module derives a ``ScalarField`` descriptor from each model field and
layers a key-based text interface on top of the typed attributes:

    * ``get_value(key)`` / ``set_value(key, text)``: single field as text
    * ``params()``: all fields as ordered ``{key: text}``
    * ``comments()``: documentation strings, verbatim
    * ``scalar_fields()``: field descriptors (name, kind, default, doc)

The external loader/writer only ever talks to a group through this interface.
"""

from __future__ import annotations

import types
from typing import Any, ClassVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.fields import FieldInfo

from ...exceptions import MalformedScalarError, RaptorConfigError
from .marshalling import ScalarKind, format_scalar, parse_scalar

_SIMPLE_KINDS: dict[type, ScalarKind] = {
    bool: "bool",
    int: "int",
    float: "float",
    str: "str",
}


# FIELD DESCRIPTOR
class ScalarField(BaseModel):
    """
    Typed option of a configuration group.

    Attributes:
        name: Stable external key (e.g. ``maxEarlierDeparture_sec``).
        attribute: Python attribute holding the typed value.
        kind: Marshalling kind (bool, int, float, str, set).
        optional: Whether the field accepts ``None`` (written as ``"null"``).
        default: Value of a freshly created group.
        doc: Documentation string for schema/help output, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    attribute: str
    kind: ScalarKind
    optional: bool = False
    default: Any = None
    doc: str | None = None

    def format(self, value: Any) -> str:
        """Render ``value`` as config-file text."""
        return format_scalar(self.kind, value)

    def parse(self, text: str | None) -> Any:
        """Convert config-file text to this field's type."""
        return parse_scalar(self.name, self.kind, text, optional=self.optional)


# BASE GROUP
class ReflectiveConfig(BaseModel):
    """
    Base class for mutable, validated configuration groups.

    Groups are populated during setup, so they are not frozen; every
    assignment is re-validated against the field constraints instead.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True, populate_by_name=True)

    NAME: ClassVar[str] = ""

    @classmethod
    def scalar_fields(cls) -> tuple[ScalarField, ...]:
        """
        Describe every scalar field of the group in declaration order.

        Returns:
            tuple of ScalarField descriptors.
        """
        return tuple(_describe(attribute, info) for attribute, info in cls.model_fields.items())

    @classmethod
    def scalar_field(cls, key: str) -> ScalarField:
        """
        Look up a field descriptor by external key.

        Raises:
            RaptorConfigError: If the group has no field named ``key``.
        """
        for field in cls.scalar_fields():
            if field.name == key:
                return field
        known = [field.name for field in cls.scalar_fields()]
        raise RaptorConfigError(f"Unknown parameter '{key}' in group '{cls.NAME}'. Known: {known}")

    def get_value(self, key: str) -> str:
        """
        Current value of a field as config-file text.

        Args:
            key: External key of the field.

        Returns:
            Text representation of the value.
        """
        field = self.scalar_field(key)
        return field.format(getattr(self, field.attribute))

    def set_value(self, key: str, text: str | None) -> None:
        """
        Parse ``text`` and assign it to the field named ``key``.

        Args:
            key: External key of the field.
            text: Raw value as read from the config file.

        Raises:
            RaptorConfigError: If ``key`` is unknown.
            MalformedScalarError: If ``text`` does not parse or violates the
                field constraints.
        """
        field = self.scalar_field(key)
        value = field.parse(text)
        try:
            setattr(self, field.attribute, value)
        except ValidationError as e:
            reason = e.errors()[0]["msg"] if e.errors() else str(e)
            raise MalformedScalarError(key, text, reason) from e

    def params(self) -> dict[str, str]:
        """All field values as ``{key: text}`` in declaration order."""
        return {
            field.name: field.format(getattr(self, field.attribute))
            for field in self.scalar_fields()
        }

    def comments(self) -> dict[str, str]:
        """Documentation strings keyed by external key, returned verbatim."""
        return {field.name: field.doc for field in self.scalar_fields() if field.doc}


# INTERNAL HELPERS
def _describe(attribute: str, info: FieldInfo) -> ScalarField:
    kind, optional = _resolve_kind(info.annotation)
    return ScalarField(
        name=info.alias or attribute,
        attribute=attribute,
        kind=kind,
        optional=optional,
        default=info.get_default(call_default_factory=True),
        doc=info.description,
    )


def _resolve_kind(annotation: Any) -> tuple[ScalarKind, bool]:
    """Map a resolved field annotation to its marshalling kind."""
    optional = False
    if get_origin(annotation) in (Union, types.UnionType):
        members = get_args(annotation)
        non_null = [member for member in members if member is not type(None)]
        optional = len(non_null) != len(members)
        if len(non_null) != 1:
            raise TypeError(f"Unsupported union field type: {annotation!r}")
        annotation = non_null[0]

    if get_origin(annotation) in (set, frozenset):
        return "set", optional

    kind = _SIMPLE_KINDS.get(annotation)
    if kind is None:
        raise TypeError(f"Unsupported scalar field type: {annotation!r}")
    return kind, optional
