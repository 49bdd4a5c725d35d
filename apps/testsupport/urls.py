from django.urls import path

from . import views

app_name = "testsupport"

urlpatterns = [
    path("reset-user", views.ResetUserView.as_view(), name="reset_user"),
    path("reset-db", views.ResetDatabaseView.as_view(), name="reset_db"),
    path("reset-all", views.ResetAllView.as_view(), name="reset_all"),
    path("last-otp", views.LastOtpView.as_view(), name="last_otp"),
]
