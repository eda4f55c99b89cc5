"""
License API views.

These endpoints back the license dashboard:
- Generate a license and its token
- Decode a token back into its record
- Validate a token against a host and date
- Build the embed URL and script tag for a licensed site
"""

from django.conf import settings
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.license.serializers import (
    DecodeLicenseRequestSerializer,
    EmbedSnippetRequestSerializer,
    EmbedSnippetResponseSerializer,
    GenerateLicenseRequestSerializer,
    GeneratedLicenseResponseSerializer,
    LicenseSerializer,
    LicenseValidationResponseSerializer,
    ValidateLicenseRequestSerializer,
)
from core.domain.value_objects import DomainMatchPolicy
from embed.application.commands.build_embed_snippet import BuildEmbedSnippetCommand
from embed.application.handlers.build_embed_snippet_handler import BuildEmbedSnippetHandler
from licenses.application.commands.generate_license import GenerateLicenseCommand
from licenses.application.handlers.decode_license_handler import DecodeLicenseHandler
from licenses.application.handlers.generate_license_handler import GenerateLicenseHandler
from licenses.application.handlers.validate_license_handler import ValidateLicenseHandler
from licenses.application.queries.decode_license import DecodeLicenseQuery
from licenses.application.queries.validate_license import ValidateLicenseQuery


def _domain_match_policy() -> DomainMatchPolicy:
    """Return the configured domain matching rule."""
    return DomainMatchPolicy(settings.LICENSE_SETTINGS["DOMAIN_MATCH_POLICY"])


class GenerateLicenseView(APIView):
    """View for generating licenses."""

    @extend_schema(
        operation_id="generate_license",
        summary="Generate License",
        description=(
            "Create a license for a domain and return its token. "
            "Without an expiry date the license runs for one month."
        ),
        tags=["License API"],
        request=GenerateLicenseRequestSerializer,
        responses={
            201: GeneratedLicenseResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Generate a license and its token."""
        serializer = GenerateLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        command = GenerateLicenseCommand(
            domain=serializer.validated_data["domain"],
            expiry_date=serializer.validated_data.get("expiry_date"),
            today=timezone.localdate(),
        )
        result = GenerateLicenseHandler().handle(command)

        response_serializer = GeneratedLicenseResponseSerializer(result)
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class DecodeLicenseView(APIView):
    """View for decoding license tokens."""

    @extend_schema(
        operation_id="decode_license",
        summary="Decode License",
        description="Return the license record carried by a token.",
        tags=["License API"],
        request=DecodeLicenseRequestSerializer,
        responses={
            200: LicenseSerializer,
            400: {"description": "Invalid license format"},
        },
    )
    def post(self, request: Request) -> Response:
        """Decode a license token."""
        serializer = DecodeLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        # DecodingError is turned into a 400 by the API exception handler
        result = DecodeLicenseHandler().handle(
            DecodeLicenseQuery(token=serializer.validated_data["token"])
        )
        return Response(LicenseSerializer(result).data, status=status.HTTP_200_OK)


class ValidateLicenseView(APIView):
    """View for validating license tokens."""

    @extend_schema(
        operation_id="validate_license",
        summary="Validate License",
        description=(
            "Validate a token against a host and a date (defaults to today). "
            "Absent and malformed tokens are reported in the result, not as errors."
        ),
        tags=["License API"],
        request=ValidateLicenseRequestSerializer,
        responses={
            200: LicenseValidationResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Validate a license token."""
        serializer = ValidateLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        query = ValidateLicenseQuery(
            token=serializer.validated_data.get("token"),
            current_host=serializer.validated_data["host"],
            current_date=serializer.validated_data.get("date") or timezone.localdate(),
            policy=_domain_match_policy(),
        )
        result = ValidateLicenseHandler().handle(query)

        return Response(
            LicenseValidationResponseSerializer(result).data, status=status.HTTP_200_OK
        )


class EmbedSnippetView(APIView):
    """View for building embed snippets."""

    @extend_schema(
        operation_id="build_embed_snippet",
        summary="Build Embed Snippet",
        description=(
            "Build the embed URL (?site=...&license=...) and the script tag "
            "a third-party page includes."
        ),
        tags=["License API"],
        request=EmbedSnippetRequestSerializer,
        responses={
            200: EmbedSnippetResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Build an embed snippet."""
        serializer = EmbedSnippetRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        command = BuildEmbedSnippetCommand(
            domain=serializer.validated_data["domain"],
            token=serializer.validated_data["token"],
            base_url=serializer.validated_data.get("base_url")
            or settings.EMBED_SETTINGS["DELIVERY_BASE_URL"],
        )
        result = BuildEmbedSnippetHandler().handle(command)

        return Response(EmbedSnippetResponseSerializer(result).data, status=status.HTTP_200_OK)
