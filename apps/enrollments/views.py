#apps/enrollments/views.py:

from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.filters import OrderingFilter

from apps.schedules.services import alcance_de
from .models import Matricula
from .serializers import MatriculaSerializer


class MatriculaFilter(filters.FilterSet):
    scheduleId = filters.NumberFilter(field_name='schedule_id')
    studentDni = filters.CharFilter(field_name='student_dni')

    class Meta:
        model = Matricula
        fields = ['scheduleId', 'studentDni']


class MatriculaViewSet(viewsets.ModelViewSet):
    queryset = Matricula.objects.select_related('schedule')
    serializer_class = MatriculaSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = MatriculaFilter
    ordering = ['id']

    def get_queryset(self):
        queryset = super().get_queryset()

        # Si es docente, solo ve las matrículas de sus horarios
        alcance = alcance_de(self.request.user)
        if alcance.horarios is not None:
            queryset = queryset.filter(schedule_id__in=alcance.horarios)

        return queryset
