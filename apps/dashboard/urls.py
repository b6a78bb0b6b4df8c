from django.urls import re_path
from . import views

urlpatterns = [
    re_path(r'^resumen/?$', views.resumen_view, name='dashboard-resumen'),
]
