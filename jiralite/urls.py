"""
URL configuration for jiralite project.

    /            board page (tabs, search, form, columns)
    /api/        JSON API for issues and board views
    /api/schema/ OpenAPI schema, /api/docs/ Swagger UI
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("board.api_urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("", include("board.urls")),
]
