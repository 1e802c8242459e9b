"""
apps.villas.mapping
~~~~~~~~~~~~~~~~~~~
Explicit conversions between the :class:`~apps.villas.models.Villa` entity
and the transfer-object dicts produced by :mod:`apps.villas.serializers`.

Only the fields listed here ever cross the API boundary; persistence-only
columns (``created_date``, ``updated_date``) stay on the entity.
"""
from __future__ import annotations

from .models import Villa

#: Writable entity fields and the value used when a DTO omits them.
#: ``None`` marks a field with no default (the DTO must provide it).
FIELD_DEFAULTS: dict[str, object] = {
    "name": None,
    "details": "",
    "rate": None,
    "occupancy": 0,
    "sqft": 0,
    "image_url": "",
    "amenity": "",
}

UPDATE_DTO_FIELDS: tuple[str, ...] = ("id", *FIELD_DEFAULTS)


def entity_fields(dto: dict) -> dict:
    """
    Return the full set of writable entity values for *dto*.

    Fields missing from *dto* fall back to :data:`FIELD_DEFAULTS`, so the
    result always describes a complete replacement of the row.  ``id`` is
    never included.

    Raises:
        KeyError: If a field without a default is missing from *dto*.
    """
    values = {}
    for field, default in FIELD_DEFAULTS.items():
        if field in dto:
            values[field] = dto[field]
        elif default is None:
            raise KeyError(field)
        else:
            values[field] = default
    return values


def from_create_dto(dto: dict) -> Villa:
    """Build an unsaved :class:`Villa` from a validated create DTO."""
    return Villa(**entity_fields(dto))


def to_update_dto(villa: Villa) -> dict:
    """Map an entity to the plain update-DTO dict targeted by JSON-patch."""
    return {field: getattr(villa, field) for field in UPDATE_DTO_FIELDS}


def apply_dto(villa: Villa, dto: dict) -> Villa:
    """Overwrite every writable field of *villa* from *dto* in place."""
    for field, value in entity_fields(dto).items():
        setattr(villa, field, value)
    return villa
