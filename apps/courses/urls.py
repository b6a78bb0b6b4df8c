#apps/courses/urls.py:

from django.urls import path, include
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'courses', views.CursoViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
