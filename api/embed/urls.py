"""
URL configuration for the embeddable content endpoint.
"""

from django.urls import path

from api.embed import views

app_name = "embed"

urlpatterns = [
    path(
        "embed.html",
        views.EmbedContentView.as_view(),
        name="embed-content",
    ),
]
