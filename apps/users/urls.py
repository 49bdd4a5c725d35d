from django.urls import path

from . import views

app_name = "users"

urlpatterns = [
    path("favorites", views.FavoritesView.as_view(), name="favorites"),
    path("toggle-favorite", views.ToggleFavoriteView.as_view(), name="toggle_favorite"),
    path("profile", views.ProfileView.as_view(), name="profile"),
    path("update-profile", views.ProfileUpdateView.as_view(), name="update_profile"),
    path("change-password", views.PasswordChangeView.as_view(), name="change_password"),
    path("preferences", views.PreferencesView.as_view(), name="preferences"),
    # Admin
    path("backup-codes", views.BackupCodeStatsView.as_view(), name="backup_codes"),
]
