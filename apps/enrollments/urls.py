from django.urls import path, include
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'enrollments', views.MatriculaViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
