#apps/students/views.py:

from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.response import Response

from apps.schedules.services import alcance_de
from .models import Estudiante
from .serializers import EstudianteSerializer
from . import services


class EstudianteFilter(filters.FilterSet):
    class Meta:
        model = Estudiante
        fields = ['dni', 'grade', 'section', 'shift', 'status']


class EstudianteViewSet(viewsets.ModelViewSet):
    queryset = Estudiante.objects.all()
    serializer_class = EstudianteSerializer
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = EstudianteFilter
    search_fields = ['name', 'lastname', 'dni']
    ordering = ['grade', 'section', 'lastname', 'name']

    def get_queryset(self):
        queryset = super().get_queryset()

        # Si es docente, solo ve a los alumnos matriculados en sus horarios
        alcance = alcance_de(self.request.user)
        if alcance.alumnos is not None:
            queryset = queryset.filter(dni__in=alcance.alumnos)

        return queryset

    @action(detail=False, methods=['get', 'put', 'patch', 'delete'], url_path=r'dni/(?P<dni>[^/.]+)')
    def por_dni(self, request, dni=None):
        """Leer, actualizar o eliminar un estudiante por su DNI"""
        estudiante = services.obtener_estudiante_por_dni(dni, self.get_queryset())

        if request.method == 'GET':
            return Response(self.get_serializer(estudiante).data)

        if request.method == 'DELETE':
            services.eliminar_estudiante_por_dni(dni)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = self.get_serializer(estudiante, data=request.data, partial=request.method == 'PATCH')
        serializer.is_valid(raise_exception=True)
        estudiante = services.actualizar_estudiante_por_dni(dni, serializer.validated_data)
        return Response(self.get_serializer(estudiante).data)
