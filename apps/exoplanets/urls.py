from django.urls import path

from . import views

app_name = "exoplanets"

urlpatterns = [
    path("", views.ExoplanetListView.as_view(), name="list"),  # GET, POST
    path("summary", views.ExoplanetSummaryView.as_view(), name="summary"),
    path("habitable", views.HabitableExoplanetsView.as_view(), name="habitable"),
    path("refresh", views.ExoplanetRefreshView.as_view(), name="refresh"),
    path("<int:exoplanet_id>", views.ExoplanetDetailView.as_view(), name="detail"),  # GET, PUT, DELETE
    path("<int:exoplanet_id>/details", views.ExoplanetEnrichedView.as_view(), name="details"),
]
