import logging

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.drf_permissions import IsAdminOrReadOnly, IsAdminRole
from apps.exoplanets import data_loader, services
from apps.exoplanets.serializers import (
    ExoplanetDetailSerializer,
    ExoplanetSerializer,
    HabitableExoplanetSerializer,
)

logger = logging.getLogger(__name__)


# --- Catalog ---
@extend_schema(
    parameters=[
        OpenApiParameter(name="name", type=str, description="Case-insensitive part of the name"),
        OpenApiParameter(name="min_temp", type=float),
        OpenApiParameter(name="max_temp", type=float),
        OpenApiParameter(name="min_distance", type=float),
        OpenApiParameter(name="max_distance", type=float),
        OpenApiParameter(name="min_year", type=int),
        OpenApiParameter(name="max_year", type=int),
        OpenApiParameter(name="page", type=int, description="1-based page number", default=1),
        OpenApiParameter(name="size", type=int, description="Page size", default=10),
    ],
)
class ExoplanetSummaryView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        params = request.query_params
        data = services.get_summaries(params, params.get("page"), params.get("size"))
        return Response(data)


class ExoplanetListView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    serializer_class = ExoplanetSerializer

    def get(self, request):
        serializer = self.serializer_class(services.get_all(), many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        exoplanet = services.create(serializer.validated_data, actor=request.user)
        return Response(self.serializer_class(exoplanet).data, status=status.HTTP_201_CREATED)


class ExoplanetDetailView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    serializer_class = ExoplanetSerializer

    def get(self, request, exoplanet_id):
        return Response(self.serializer_class(services.get_by_id(exoplanet_id)).data)

    def put(self, request, exoplanet_id):
        serializer = self.serializer_class(services.get_by_id(exoplanet_id), data=request.data)
        serializer.is_valid(raise_exception=True)
        exoplanet = services.update(exoplanet_id, serializer.validated_data, actor=request.user)
        return Response(self.serializer_class(exoplanet).data)

    def delete(self, request, exoplanet_id):
        services.delete(exoplanet_id)
        return Response({"message": "Exoplanet deleted successfully"})


class ExoplanetEnrichedView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses=ExoplanetDetailSerializer)
    def get(self, request, exoplanet_id):
        return Response(ExoplanetDetailSerializer(services.get_details(exoplanet_id)).data)


class HabitableExoplanetsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses=HabitableExoplanetSerializer(many=True))
    def get(self, request):
        return Response(HabitableExoplanetSerializer(services.get_habitable(), many=True).data)


class ExoplanetRefreshView(APIView):
    permission_classes = [IsAdminRole]

    @extend_schema(request=None)
    def post(self, request):
        logger.info("Exoplanet refresh requested by %s", request.user.email)
        counts = services.refresh_exoplanet_data()
        return Response({"message": "Exoplanet data refreshed successfully", **counts})


# --- Data loader ---
class InsertRandomExoplanetsView(APIView):
    permission_classes = [IsAdminRole]

    @extend_schema(request=None)
    def post(self, request):
        inserted = data_loader.insert_random_exoplanets()
        return Response({"message": f"{inserted} exoplanets inserted successfully.", "inserted": inserted})


class InsertHabitableExoplanetsView(APIView):
    permission_classes = [IsAdminRole]

    @extend_schema(request=None)
    def post(self, request):
        inserted = data_loader.insert_habitable_exoplanets()
        return Response({"message": f"{inserted} habitable exoplanets inserted successfully.", "inserted": inserted})


class ClearExoplanetsView(APIView):
    permission_classes = [IsAdminRole]

    def delete(self, request):
        deleted = data_loader.clear_exoplanets()
        return Response({"message": "All exoplanets have been deleted.", "deleted": deleted})
