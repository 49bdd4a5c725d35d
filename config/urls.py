from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from apps.common.views import HealthView

swagger_urls = [
    path("schema/swagger-ui/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("schema/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]

api_urls = [
    path("auth/", include("apps.authentication.urls", namespace="authentication")),
    path("exoplanets/", include("apps.exoplanets.urls", namespace="exoplanets")),
    path("user/", include("apps.users.urls", namespace="users")),
    path("admin/data-loader/", include("apps.exoplanets.loader_urls", namespace="data-loader")),
    path("test/", include("apps.testsupport.urls", namespace="testsupport")),
    path("health", HealthView.as_view(), name="health"),
    path("", include(swagger_urls)),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(api_urls)),
]
