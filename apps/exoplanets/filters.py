import django_filters

from apps.exoplanets.models import Exoplanet


class ExoplanetFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    min_temp = django_filters.NumberFilter(field_name="temperature", lookup_expr="gte")
    max_temp = django_filters.NumberFilter(field_name="temperature", lookup_expr="lte")
    min_distance = django_filters.NumberFilter(field_name="distance", lookup_expr="gte")
    max_distance = django_filters.NumberFilter(field_name="distance", lookup_expr="lte")
    min_year = django_filters.NumberFilter(field_name="year_discovered", lookup_expr="gte")
    max_year = django_filters.NumberFilter(field_name="year_discovered", lookup_expr="lte")

    class Meta:
        model = Exoplanet
        fields = ["name", "min_temp", "max_temp", "min_distance", "max_distance", "min_year", "max_year"]
