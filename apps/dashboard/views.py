#apps/dashboard/views.py:

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view
from rest_framework.response import Response

from apps.courses.services import coleccion_cursos
from apps.schedules.services import coleccion_horarios, coleccion_matriculas
from apps.students.services import coleccion_estudiantes
from apps.teachers.services import coleccion_docentes
from .services import resumen_dashboard

logger = logging.getLogger(__name__)


@extend_schema(responses=OpenApiTypes.OBJECT)
@api_view(['GET'])
def resumen_view(request):
    """Estadísticas y observaciones del panel principal"""
    resumen = resumen_dashboard(
        request.user,
        coleccion_estudiantes(),
        coleccion_docentes(),
        coleccion_cursos(),
        coleccion_horarios(),
        coleccion_matriculas(),
    )
    logger.debug("Resumen del panel: %s", resumen)
    return Response(resumen)
