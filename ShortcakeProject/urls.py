from django.urls import include, path

urlpatterns = [
    path("shortcode-ui/v1/", include("shortcode_ui.api.urls")),
]
