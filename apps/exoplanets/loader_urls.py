from django.urls import path

from . import views

app_name = "data_loader"

urlpatterns = [
    path("insert-500-exoplanets", views.InsertRandomExoplanetsView.as_view(), name="insert_random"),
    path("insert-habitable-exoplanets", views.InsertHabitableExoplanetsView.as_view(), name="insert_habitable"),
    path("clear-exoplanets", views.ClearExoplanetsView.as_view(), name="clear"),
]
