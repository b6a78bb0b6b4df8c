#apps/courses/views.py:

from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.filters import OrderingFilter, SearchFilter

from apps.schedules.services import alcance_de
from .models import Curso
from .serializers import CursoSerializer


class CursoFilter(filters.FilterSet):
    teacherDni = filters.CharFilter(field_name='teacher_dni')

    class Meta:
        model = Curso
        fields = ['id', 'teacherDni', 'status']


class CursoViewSet(viewsets.ModelViewSet):
    queryset = Curso.objects.all()
    serializer_class = CursoSerializer
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = CursoFilter
    search_fields = ['name']
    ordering = ['name']

    def get_queryset(self):
        queryset = super().get_queryset()

        # Si es docente, solo ve los cursos de sus horarios
        alcance = alcance_de(self.request.user)
        if alcance.cursos is not None:
            queryset = queryset.filter(id__in=alcance.cursos)

        return queryset
