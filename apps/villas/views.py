"""
apps.villas.views
~~~~~~~~~~~~~~~~~
Thin DRF API views for the Villa API.
All business logic is delegated to
:mod:`apps.villas.services.villa_service`.

Endpoints
---------
GET     /villaAPI           – List villas
POST    /villaAPI           – Create villa
GET     /villaAPI/{id}      – Get villa
PUT     /villaAPI/{id}      – Replace villa
PATCH   /villaAPI/{id}      – Apply a JSON-patch document
DELETE  /villaAPI/{id}      – Delete villa
"""
from __future__ import annotations

from django.urls import reverse
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.villas import services
from common.exceptions import BadRequestError
from common.parsers import JSONPatchParser
from .serializers import (
    PatchOperationSerializer,
    VillaCreateSerializer,
    VillaSerializer,
    VillaUpdateSerializer,
)


def _require_body(request: Request) -> None:
    if not request.data:
        raise BadRequestError("Request body is required.", code="missing_body")


class VillaListCreateView(APIView):
    """GET /villaAPI  –  POST /villaAPI"""

    @extend_schema(
        summary="List Villas",
        responses={200: VillaSerializer(many=True)},
        tags=["Villas"],
    )
    def get(self, request: Request) -> Response:
        villas = services.list_villas()
        return Response(VillaSerializer(villas, many=True).data)

    @extend_schema(
        summary="Create Villa",
        description=(
            "Creates a villa.  Names are unique case-insensitively; a duplicate "
            "is reported under the 'CustomError' key."
        ),
        request=VillaCreateSerializer,
        responses={
            201: VillaSerializer,
            400: OpenApiResponse(description="Missing body, invalid fields or duplicate name."),
        },
        tags=["Villas"],
    )
    def post(self, request: Request) -> Response:
        _require_body(request)
        serializer = VillaCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        villa = services.create_villa(data=serializer.validated_data)
        location = request.build_absolute_uri(
            reverse("villa-detail", kwargs={"pk": villa.id})
        )
        return Response(
            VillaSerializer(villa).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )


class VillaDetailView(APIView):
    """GET / PUT / PATCH / DELETE /villaAPI/<pk>"""

    parser_classes = [JSONParser, JSONPatchParser]

    @extend_schema(
        summary="Get Villa",
        responses={
            200: VillaSerializer,
            400: OpenApiResponse(description="Id is zero."),
            404: OpenApiResponse(description="Villa not found."),
        },
        tags=["Villas"],
    )
    def get(self, request: Request, pk: int) -> Response:
        villa = services.get_villa(pk)
        return Response(VillaSerializer(villa).data)

    @extend_schema(
        summary="Replace Villa",
        description="Overwrites every field of the villa.  Body id must match the URL id.",
        request=VillaUpdateSerializer,
        responses={
            204: None,
            400: OpenApiResponse(description="Missing body, invalid fields or id mismatch."),
            404: OpenApiResponse(description="Villa not found."),
        },
        tags=["Villas"],
    )
    def put(self, request: Request, pk: int) -> Response:
        _require_body(request)
        serializer = VillaUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_villa(pk, data=serializer.validated_data)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary="Patch Villa",
        description=(
            "Applies a JSON-patch document to the villa's update shape.  The "
            "patched villa is validated before anything is saved."
        ),
        request=PatchOperationSerializer(many=True),
        responses={
            204: None,
            400: OpenApiResponse(description="Invalid id, patch or patched villa."),
        },
        tags=["Villas"],
    )
    def patch(self, request: Request, pk: int) -> Response:
        if pk <= 0:
            raise BadRequestError("Villa id must be a positive integer.", code="invalid_id")
        _require_body(request)
        serializer = PatchOperationSerializer(
            data=request.data, many=True, allow_empty=False
        )
        serializer.is_valid(raise_exception=True)
        operations = [dict(op) for op in serializer.validated_data]
        services.patch_villa(pk, operations=operations)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary="Delete Villa",
        responses={
            204: None,
            400: OpenApiResponse(description="Id is zero."),
            404: OpenApiResponse(description="Villa not found."),
        },
        tags=["Villas"],
    )
    def delete(self, request: Request, pk: int) -> Response:
        services.delete_villa(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
