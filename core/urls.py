# core/urls.py
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # API endpoints
    path('', include('apps.authentication.urls')),
    path('', include('apps.teachers.urls')),
    path('', include('apps.students.urls')),
    path('', include('apps.courses.urls')),
    path('', include('apps.schedules.urls')),
    path('', include('apps.enrollments.urls')),
    path('', include('apps.grades.urls')),
    path('dashboard/', include('apps.dashboard.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
