from rest_framework import serializers

from apps.authentication.models import Usuario
from core.fields import GradoField
from .models import Docente, dni_validator


class DocenteSerializer(serializers.ModelSerializer):
    grade = GradoField()

    class Meta:
        model = Docente
        fields = ['id', 'dni', 'name', 'lastname', 'email', 'sex', 'birthdate', 'specialty',
                  'grade', 'section', 'role', 'status', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'dni': {'validators': [dni_validator]},
            'email': {'validators': [], 'error_messages': {'invalid': 'Correo invalido'}},
            'birthdate': {'error_messages': {'required': 'Fecha requerida'}},
            'specialty': {'error_messages': {'invalid_choice': 'Especialidad invalida'}},
            'section': {'error_messages': {'invalid_choice': 'Seccion invalida'}},
        }

    def _valor(self, attrs, campo):
        if campo in attrs:
            return attrs[campo]
        return getattr(self.instance, campo, None)

    def validate(self, attrs):
        errors = {}
        dni = self._valor(attrs, 'dni')
        email = self._valor(attrs, 'email') or ''

        for campo, mensaje in (('name', "Nombre obligatorio"), ('lastname', "Apellido obligatorio")):
            if campo in attrs and not attrs[campo].strip():
                errors[campo] = mensaje

        otros = Docente.objects.all()
        if self.instance is not None:
            otros = otros.exclude(pk=self.instance.pk)

        if 'dni' in attrs and otros.filter(dni=dni).exists():
            errors['dni'] = "Ya existe un docente con este DNI"

        if 'email' in attrs:
            if otros.filter(email=email).exists():
                errors['email'] = "Ya existe un docente con este email"
            else:
                # El usuario espejo del docente usa el mismo email
                dni_previo = self.instance.dni if self.instance is not None else dni
                usuarios = Usuario.objects.filter(email=email).exclude(teacher_dni=dni_previo)
                if usuarios.exists():
                    errors['email'] = "Ya existe un usuario con este email"

        if errors:
            raise serializers.ValidationError(errors)
        return attrs
