from django_filters import rest_framework as filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import Usuario
from .serializers import LoginSerializer, SesionSerializer, UsuarioSerializer
from .tokens import emitir_sesion


@extend_schema(request=LoginSerializer, responses=SesionSerializer)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """Iniciar sesión y obtener el token JWT"""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    sesion = emitir_sesion(
        serializer.validated_data['email'],
        serializer.validated_data['password']
    )
    return Response(sesion)


@api_view(['GET'])
def me_view(request):
    """Identidad del token actual"""
    return Response({'user': request.user.as_dict()})


class UsuarioFilter(filters.FilterSet):
    teacherDni = filters.CharFilter(field_name='teacher_dni')

    class Meta:
        model = Usuario
        fields = ['email', 'role', 'teacherDni', 'is_active']


class UsuarioViewSet(viewsets.ModelViewSet):
    """Gestión de usuarios (solo administradores, ver PoliticaDeAcceso)"""
    queryset = Usuario.objects.all()
    serializer_class = UsuarioSerializer
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = UsuarioFilter
    search_fields = ['email', 'name']
    ordering = ['id']
