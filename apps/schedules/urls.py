from django.urls import path, include
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'schedules', views.HorarioViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
