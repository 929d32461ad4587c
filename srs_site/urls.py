from django.conf import settings
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from vocabulary.views import UserViewSet, initialize_data

router = DefaultRouter()
router.register("users", UserViewSet, basename="user")

urlpatterns = [
    path("api/", include(router.urls)),
    path("api/", include("scheduler.api.urls")),
]

# demo reset wipes every learner, local development only
if settings.DEBUG:
    urlpatterns.append(path("api/initialize-data", initialize_data, name="initialize-data"))
