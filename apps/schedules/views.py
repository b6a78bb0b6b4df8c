from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.filters import OrderingFilter

from .models import Horario
from .serializers import HorarioSerializer
from .services import alcance_de


class HorarioFilter(filters.FilterSet):
    teacherDni = filters.CharFilter(field_name='teacher_dni')

    class Meta:
        model = Horario
        fields = ['teacherDni', 'shift', 'grade', 'section']


class HorarioViewSet(viewsets.ModelViewSet):
    queryset = Horario.objects.all()
    serializer_class = HorarioSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = HorarioFilter
    ordering = ['id']

    def get_queryset(self):
        queryset = super().get_queryset()

        # Si es docente, solo ve sus propios horarios
        alcance = alcance_de(self.request.user)
        if alcance.horarios is not None:
            queryset = queryset.filter(id__in=alcance.horarios)

        return queryset
