#apps/grades/views.py:

from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.courses.services import coleccion_cursos
from apps.schedules.services import alcance_de, coleccion_horarios, coleccion_matriculas, cursos_permitidos
from apps.students.services import coleccion_estudiantes, obtener_estudiante_por_dni
from core.exceptions import NoEncontrado
from .models import Nota
from .serializers import FilaPromedioSerializer, NotaSerializer
from . import services

FILTROS_SALON = [
    OpenApiParameter('grade', str, description='Grado (1-6)'),
    OpenApiParameter('section', str, description='Sección (A-D)'),
]


class NotaFilter(filters.FilterSet):
    studentDni = filters.CharFilter(field_name='student_dni')
    courseId = filters.CharFilter(field_name='course_id')

    class Meta:
        model = Nota
        fields = ['studentDni', 'courseId', 'term', 'evaluation']


class NotaViewSet(viewsets.ModelViewSet):
    queryset = Nota.objects.all()
    serializer_class = NotaSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = NotaFilter
    ordering = ['student_dni', 'course_id', 'term', 'evaluation']

    def get_queryset(self):
        queryset = super().get_queryset()

        # Si es docente, solo ve notas de sus cursos y de sus alumnos
        alcance = alcance_de(self.request.user)
        if alcance.cursos is not None:
            queryset = queryset.filter(course_id__in=alcance.cursos, student_dni__in=alcance.alumnos)

        return queryset

    def _filtros_salon(self, request):
        return request.query_params.get('grade'), request.query_params.get('section')

    @extend_schema(parameters=FILTROS_SALON, responses=FilaPromedioSerializer(many=True))
    @action(detail=False, methods=['get'])
    def promedios(self, request):
        """Promedios por bimestre y final de los alumnos visibles"""
        grade, section = self._filtros_salon(request)
        filas = services.filas_de_promedios(
            request.user,
            coleccion_estudiantes(),
            coleccion_horarios(),
            coleccion_matriculas(),
            services.coleccion_notas(),
            grade=grade,
            section=section,
        )
        return Response(FilaPromedioSerializer(filas, many=True).data)

    @extend_schema(parameters=FILTROS_SALON)
    @action(detail=False, methods=['get'])
    def completitud(self, request):
        """Indica si todos los alumnos del salón tienen nota en todos sus cursos"""
        grade, section = self._filtros_salon(request)
        return Response(services.salon_completo(
            request.user,
            coleccion_estudiantes(),
            coleccion_horarios(),
            coleccion_matriculas(),
            services.coleccion_notas(),
            grade=grade,
            section=section,
        ))

    @action(detail=False, methods=['get'], url_path=r'libreta/(?P<dni>[^/.]+)')
    def libreta(self, request, dni=None):
        """Datos de la libreta de notas de un alumno"""
        obtener_estudiante_por_dni(dni)

        alcance = alcance_de(request.user)
        if alcance.alumnos is not None and dni not in alcance.alumnos:
            raise NoEncontrado(f"Estudiante con DNI {dni} no encontrado")

        permitidos = cursos_permitidos(request.user, coleccion_horarios())
        return Response(services.datos_libreta(
            dni, services.coleccion_notas(), coleccion_cursos(), permitidos=permitidos
        ))
