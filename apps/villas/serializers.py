"""
apps.villas.serializers
~~~~~~~~~~~~~~~~~~~~~~~
Transfer-object serializers for the Villa API.
Shape validation only; entity conversion lives in :mod:`apps.villas.mapping`.
"""
from rest_framework import serializers

from .models import Villa

#: Upper bound of the integer columns (PositiveIntegerField / 32-bit INTEGER).
MAX_DB_INT = 2147483647


# ---------------------------------------------------------------------------
# Villa DTOs
# ---------------------------------------------------------------------------

class VillaSerializer(serializers.ModelSerializer):
    """Full view of a Villa.  Persistence timestamps are not exposed."""

    class Meta:
        model = Villa
        fields = [
            "id",
            "name",
            "details",
            "rate",
            "occupancy",
            "sqft",
            "image_url",
            "amenity",
        ]
        read_only_fields = fields


class VillaCreateSerializer(serializers.Serializer):
    """Validates POST /villaAPI request body."""

    name = serializers.CharField(max_length=30)
    details = serializers.CharField(required=False, allow_blank=True, default="")
    rate = serializers.FloatField()
    occupancy = serializers.IntegerField(min_value=0, max_value=MAX_DB_INT, default=0)
    sqft = serializers.IntegerField(min_value=0, max_value=MAX_DB_INT, default=0)
    image_url = serializers.CharField(
        max_length=500, required=False, allow_blank=True, default=""
    )
    amenity = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )


class VillaUpdateSerializer(serializers.Serializer):
    """
    Validates PUT /villaAPI/{id} request bodies and JSON-patched update
    documents.  ``id`` must match the id in the URL.
    """

    id = serializers.IntegerField(min_value=1, max_value=MAX_DB_INT)
    name = serializers.CharField(max_length=30)
    details = serializers.CharField(required=False, allow_blank=True, default="")
    rate = serializers.FloatField()
    occupancy = serializers.IntegerField(min_value=0, max_value=MAX_DB_INT)
    sqft = serializers.IntegerField(min_value=0, max_value=MAX_DB_INT)
    image_url = serializers.CharField(max_length=500, allow_blank=True)
    amenity = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )


# ---------------------------------------------------------------------------
# JSON-patch
# ---------------------------------------------------------------------------

class PatchOperationSerializer(serializers.Serializer):
    """One RFC 6902 operation.  Submit a list of these (``many=True``)."""

    op = serializers.ChoiceField(
        choices=["add", "remove", "replace", "move", "copy", "test"]
    )
    path = serializers.CharField(allow_blank=True, trim_whitespace=False)
    value = serializers.JSONField(required=False, allow_null=True)

    def get_fields(self):
        # "from" is a keyword, so it cannot be declared as a class attribute.
        fields = super().get_fields()
        fields["from"] = serializers.CharField(
            required=False, allow_blank=True, trim_whitespace=False
        )
        return fields
