#apps/students/urls.py:

from django.urls import path, include
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'students', views.EstudianteViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
