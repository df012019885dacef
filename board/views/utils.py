# views/utils.py
"""
Shared tooling for drf-spectacular docs on APIView classes, plus the
mapping from service errors to ``{"detail": ...}`` responses.
"""
from django.core.exceptions import ValidationError
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers, status
from rest_framework.response import Response

from board.exceptions import CreateInFlight, IssueStoreError

# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()}
)

# ---- Param helpers

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def q_str(name: str, description: str, required: bool = False, enum=None):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description, enum=enum)

# ---- Convenience for common responses

def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs

# ---- Error responses

SERVICE_ERRORS = (ValidationError, IssueStoreError, CreateInFlight)

def not_found(what: str = "Issue"):
    return Response({"detail": f"{what} not found"}, status=status.HTTP_404_NOT_FOUND)

def error_response(exc: Exception):
    if isinstance(exc, ValidationError):
        return Response({"detail": exc.messages[0]}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, CreateInFlight):
        return Response({"detail": exc.message}, status=status.HTTP_409_CONFLICT)
    # IssueStoreError: the store message is shown as is
    return Response({"detail": exc.message}, status=status.HTTP_400_BAD_REQUEST)
