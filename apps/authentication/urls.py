#apps/authentication/urls.py
from django.urls import path, include, re_path
from core.routers import RouterBarraOpcional
from . import views

router = RouterBarraOpcional()
router.register(r'users', views.UsuarioViewSet)

urlpatterns = [
    # Endpoints de autenticación
    re_path(r'^auth/login/?$', views.login_view, name='login'),
    re_path(r'^auth/me/?$', views.me_view, name='me'),

    path('', include(router.urls)),
]
