#apps/grades/urls.py:

from django.urls import path, include
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'grades', views.NotaViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
