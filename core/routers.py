#core/routers.py

from rest_framework.routers import DefaultRouter


class RouterBarraOpcional(DefaultRouter):
    """DefaultRouter que acepta rutas con o sin barra final (/students y /students/)"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = '/?'
