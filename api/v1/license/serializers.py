"""
Serializers for License API endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import normalize_domain


class LicensedDomainField(serializers.CharField):
    """Domain name field that normalizes to lowercase and rejects blanks."""

    def __init__(self, **kwargs):
        kwargs.setdefault("max_length", 253)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = normalize_domain(super().to_internal_value(data))
        if not value:
            raise serializers.ValidationError("Domain cannot be empty.")
        return value


class GenerateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for generate license request."""

    domain = LicensedDomainField(required=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)


class LicenseSerializer(serializers.Serializer):
    """Serializer for a decoded license record."""

    key = serializers.CharField()
    domain = serializers.CharField()
    expiry_date = serializers.DateField()
    generation_date = serializers.DateField()


class GeneratedLicenseResponseSerializer(LicenseSerializer):
    """Serializer for generate license response."""

    token = serializers.CharField()


class DecodeLicenseRequestSerializer(serializers.Serializer):
    """Serializer for decode license request."""

    token = serializers.CharField(required=True, max_length=4096)


class ValidateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for validate license request.

    A missing or blank token is not an error: it validates as "absent".
    """

    token = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=4096, default=None
    )
    host = serializers.CharField(required=True, max_length=253)
    date = serializers.DateField(required=False, allow_null=True, default=None)


class LicenseValidationResponseSerializer(serializers.Serializer):
    """Serializer for validate license response."""

    status = serializers.ChoiceField(
        choices=["valid", "domain_mismatch", "expired", "malformed", "absent"]
    )
    is_valid = serializers.BooleanField()
    message = serializers.CharField()
    license = LicenseSerializer(allow_null=True)


class EmbedSnippetRequestSerializer(serializers.Serializer):
    """Serializer for embed snippet request."""

    domain = LicensedDomainField(required=True)
    token = serializers.CharField(required=True, max_length=4096)
    base_url = serializers.URLField(required=False)


class EmbedSnippetResponseSerializer(serializers.Serializer):
    """Serializer for embed snippet response."""

    embed_url = serializers.CharField()
    script_tag = serializers.CharField()
