#apps/teachers/views.py:

from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.response import Response

from .models import Docente
from .serializers import DocenteSerializer
from . import services


class DocenteFilter(filters.FilterSet):
    class Meta:
        model = Docente
        fields = ['dni', 'email', 'status', 'specialty', 'grade', 'section']


class DocenteViewSet(viewsets.ModelViewSet):
    queryset = Docente.objects.all()
    serializer_class = DocenteSerializer
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = DocenteFilter
    search_fields = ['name', 'lastname', 'dni', 'email']
    ordering = ['lastname', 'name']

    def perform_create(self, serializer):
        serializer.instance = services.crear_docente(serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = services.actualizar_docente(serializer.instance, serializer.validated_data)

    def perform_destroy(self, instance):
        services.eliminar_docente(instance)

    @action(detail=False, methods=['get', 'put', 'patch', 'delete'], url_path=r'dni/(?P<dni>[^/.]+)')
    def por_dni(self, request, dni=None):
        """Leer, actualizar o eliminar un docente por su DNI"""
        docente = services.obtener_docente_por_dni(dni)

        if request.method == 'GET':
            return Response(self.get_serializer(docente).data)

        if request.method == 'DELETE':
            services.eliminar_docente_por_dni(dni)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = self.get_serializer(docente, data=request.data, partial=request.method == 'PATCH')
        serializer.is_valid(raise_exception=True)
        docente = services.actualizar_docente_por_dni(dni, serializer.validated_data)
        return Response(self.get_serializer(docente).data)
