"""
apps.villas.services.villa_service
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
All business logic for the Villa API.

Views must call only these functions.  No business logic lives in views or
serializers.

Responsibilities
----------------
- CRUD for :class:`~apps.villas.models.Villa`.
- Case-insensitive name uniqueness, checked up front and backed by the
  ``villa_name_ci_unique`` database constraint.
- Applying JSON-patch documents to the update DTO and validating the
  result before anything is written.
"""
from __future__ import annotations

import jsonpatch
import jsonpointer
import structlog
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.villas import mapping
from apps.villas.models import Villa
from apps.villas.serializers import VillaUpdateSerializer
from common.exceptions import BadRequestError, ModelStateError, NotFoundError

logger = structlog.get_logger(__name__)

#: Model-state key used for errors that do not belong to a single field.
CUSTOM_ERROR_KEY = "CustomError"
DUPLICATE_NAME_MESSAGE = "Villa already exists!"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_valid_id(villa_id: int) -> None:
    if villa_id <= 0:
        raise BadRequestError(
            f"Villa id must be a positive integer, got {villa_id}.",
            code="invalid_id",
        )


def _name_taken(name: str, *, exclude_id: int | None = None) -> bool:
    qs = Villa.objects.filter(name__iexact=name)
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)
    return qs.exists()


def _duplicate_name(name: str) -> ModelStateError:
    logger.warning("villa_name_conflict", name=name)
    return ModelStateError({CUSTOM_ERROR_KEY: [DUPLICATE_NAME_MESSAGE]})


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def list_villas() -> list[Villa]:
    """Return every villa, ordered by id."""
    return list(Villa.objects.all())


def get_villa(villa_id: int) -> Villa:
    """
    Fetch a single :class:`Villa`.

    Raises:
        BadRequestError: If *villa_id* is zero or negative.
        NotFoundError: If no villa has that id.
    """
    _require_valid_id(villa_id)
    try:
        return Villa.objects.get(pk=villa_id)
    except Villa.DoesNotExist:
        raise NotFoundError(f"Villa {villa_id} not found.")


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def create_villa(*, data: dict) -> Villa:
    """
    Insert a villa from a validated create DTO.

    Raises:
        ModelStateError: If another villa already uses the same name,
            compared case-insensitively.  Raised both by the pre-check and
            when a concurrent insert trips the unique constraint.
    """
    if _name_taken(data["name"]):
        raise _duplicate_name(data["name"])

    villa = mapping.from_create_dto(data)
    try:
        with transaction.atomic():
            villa.save()
    except IntegrityError as exc:
        raise _duplicate_name(data["name"]) from exc

    logger.info("villa_created", villa_id=villa.id, name=villa.name)
    return villa


def update_villa(villa_id: int, *, data: dict) -> None:
    """
    Fully replace the villa *villa_id* with a validated update DTO.

    Every writable field is overwritten; optional fields missing from
    *data* are reset to their defaults.

    Raises:
        BadRequestError: If the body id does not match *villa_id*.
        ModelStateError: If the new name belongs to another villa.
        NotFoundError: If the update matched no row.
    """
    if data.get("id") != villa_id:
        raise BadRequestError(
            "Villa id in the URL does not match the id in the body.",
            code="id_mismatch",
        )
    if _name_taken(data["name"], exclude_id=villa_id):
        raise _duplicate_name(data["name"])

    fields = mapping.entity_fields(data)
    fields["updated_date"] = timezone.now()
    try:
        with transaction.atomic():
            updated = Villa.objects.filter(pk=villa_id).update(**fields)
    except IntegrityError as exc:
        raise _duplicate_name(data["name"]) from exc

    if not updated:
        raise NotFoundError(f"Villa {villa_id} not found.")
    logger.info("villa_updated", villa_id=villa_id)


def patch_villa(villa_id: int, *, operations: list[dict]) -> Villa:
    """
    Apply a JSON-patch document to the update DTO of villa *villa_id*.

    Steps:

    1. Load the villa and map it to an update DTO.
    2. Apply *operations* to a copy of that DTO.
    3. Validate the patched DTO (shape, id, name uniqueness).
    4. Persist only when every check passed.

    Raises:
        BadRequestError: If *villa_id* is invalid or no villa has that id.
        ModelStateError: If the patch cannot be applied or the patched DTO
            is invalid.  Nothing is written in that case.
    """
    _require_valid_id(villa_id)
    villa = Villa.objects.filter(pk=villa_id).first()
    if villa is None:
        raise BadRequestError(f"Villa {villa_id} not found.", code="invalid_id")

    dto = mapping.to_update_dto(villa)
    try:
        patched = jsonpatch.JsonPatch(operations).apply(dto)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
        logger.warning("villa_patch_rejected", villa_id=villa_id, error=str(exc))
        raise ModelStateError({"patch": [str(exc)]}) from exc

    serializer = VillaUpdateSerializer(data=patched)
    if not serializer.is_valid():
        logger.warning(
            "villa_patch_rejected",
            villa_id=villa_id,
            error_fields=sorted(serializer.errors),
        )
        raise ModelStateError(serializer.errors)

    validated = serializer.validated_data
    if validated["id"] != villa_id:
        raise ModelStateError({"id": ["The villa id cannot be changed."]})
    if _name_taken(validated["name"], exclude_id=villa_id):
        raise _duplicate_name(validated["name"])

    mapping.apply_dto(villa, validated)
    try:
        with transaction.atomic():
            villa.save()
    except IntegrityError as exc:
        raise _duplicate_name(validated["name"]) from exc

    logger.info("villa_patched", villa_id=villa_id, operations=len(operations))
    return villa


def delete_villa(villa_id: int) -> None:
    """
    Remove the villa *villa_id*.

    Raises:
        BadRequestError: If *villa_id* is zero or negative.
        NotFoundError: If no villa has that id.
    """
    villa = get_villa(villa_id)
    villa.delete()
    logger.info("villa_deleted", villa_id=villa_id)
