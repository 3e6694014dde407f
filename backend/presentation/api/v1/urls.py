"""
API v1 URL Configuration.

All API endpoints for version 1.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views.auth import AuthViewSet
from .views.project import ProjectViewSet, ProjectTaskViewSet
from .views.facility import FacilityViewSet

# Create router
router = DefaultRouter()

# Auth
router.register(r'auth', AuthViewSet, basename='auth')

# Projects
router.register(r'projects', ProjectViewSet, basename='projects')
router.register(r'project-tasks', ProjectTaskViewSet, basename='project-tasks')

# Facilities
router.register(r'facilities', FacilityViewSet, basename='facilities')

app_name = 'api_v1'

urlpatterns = [
    path('', include(router.urls)),
]
