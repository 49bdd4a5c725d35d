from rest_framework import serializers

from apps.exoplanets.models import Exoplanet


class ExoplanetSerializer(serializers.ModelSerializer):
    potentially_habitable = serializers.BooleanField(source="is_potentially_habitable", read_only=True)
    formatted_orbital_period = serializers.CharField(read_only=True)

    class Meta:
        model = Exoplanet
        fields = [
            "id",
            "name",
            "image_url",
            "distance",
            "temperature",
            "year_discovered",
            "radius",
            "mass",
            "semi_major_axis",
            "eccentricity",
            "orbital_period_days",
            "orbital_period_years",
            "potentially_habitable",
            "formatted_orbital_period",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_eccentricity(self, value):
        if value is not None and not 0 <= value < 1:
            raise serializers.ValidationError("Eccentricity must be in [0, 1).")
        return value


class ExoplanetSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Exoplanet
        fields = ["id", "name", "image_url"]
        read_only_fields = fields


class ExoplanetDetailSerializer(serializers.Serializer):
    """Exoplanet fields plus everything the enrichment chain derives from them."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)
    distance = serializers.FloatField(allow_null=True)
    temperature = serializers.FloatField(allow_null=True)
    year_discovered = serializers.IntegerField(allow_null=True)
    radius = serializers.FloatField(allow_null=True)
    mass = serializers.FloatField(allow_null=True)
    semi_major_axis = serializers.FloatField(allow_null=True)
    eccentricity = serializers.FloatField(allow_null=True)
    orbital_period_days = serializers.FloatField(allow_null=True)
    orbital_period_years = serializers.FloatField(allow_null=True)
    potentially_habitable = serializers.BooleanField()
    earth_size_comparison = serializers.CharField()
    earth_mass_comparison = serializers.CharField()
    travel_time_years = serializers.FloatField(allow_null=True)
    travel_speed_fraction = serializers.FloatField()
    description = serializers.CharField()


class HabitableExoplanetSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="exoplanet.id")
    name = serializers.CharField()
    image_url = serializers.CharField(source="exoplanet.image_url", allow_null=True)
    distance = serializers.FloatField(allow_null=True)
    temperature = serializers.FloatField(allow_null=True)
    radius = serializers.FloatField(allow_null=True)
    mass = serializers.FloatField(allow_null=True)
    potentially_habitable = serializers.BooleanField(source="is_potentially_habitable")
    description = serializers.CharField()
