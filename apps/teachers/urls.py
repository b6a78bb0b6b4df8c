#apps/teachers/urls.py:

from django.urls import path, include
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'teachers', views.DocenteViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
