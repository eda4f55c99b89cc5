"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.license import views

app_name = "license"

urlpatterns = [
    path(
        "generate",
        views.GenerateLicenseView.as_view(),
        name="generate-license",
    ),
    path(
        "decode",
        views.DecodeLicenseView.as_view(),
        name="decode-license",
    ),
    path(
        "validate",
        views.ValidateLicenseView.as_view(),
        name="validate-license",
    ),
    path(
        "embed-snippet",
        views.EmbedSnippetView.as_view(),
        name="embed-snippet",
    ),
]
