from django.contrib import admin
from unfold.admin import ModelAdmin

from apps.exoplanets.models import Exoplanet


@admin.register(Exoplanet)
class ExoplanetAdmin(ModelAdmin):
    list_display = ("name", "temperature", "distance", "radius", "mass", "year_discovered")
    list_filter = ("year_discovered",)
    search_fields = ("name",)
    ordering = ("-id",)
    readonly_fields = ("created_at", "updated_at", "created_by", "updated_by", "version")
