from rest_framework import serializers

from .models import CredentialEncoding, Usuario


class UsuarioSerializer(serializers.ModelSerializer):
    teacherDni = serializers.CharField(source='teacher_dni', required=False, allow_null=True, allow_blank=True)
    passwordEncoding = serializers.ChoiceField(
        source='password_encoding',
        choices=CredentialEncoding.choices,
        required=False
    )
    password = serializers.CharField(write_only=True, required=False)

    class Meta:
        model = Usuario
        fields = ['id', 'email', 'name', 'role', 'teacherDni', 'password', 'passwordEncoding',
                  'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        if self.instance is None and not attrs.get('password'):
            raise serializers.ValidationError({'password': "La contraseña es obligatoria"})
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        encoding = validated_data.pop('password_encoding', None)
        return Usuario.objects.create_user(password=password, password_encoding=encoding, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        encoding = validated_data.pop('password_encoding', None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)

        # Cambiar la codificación exige volver a recibir la contraseña
        if password:
            instance.set_password(password, encoding)
        elif encoding and encoding != instance.password_encoding:
            raise serializers.ValidationError(
                {'passwordEncoding': "Para cambiar la codificación envíe también la contraseña"}
            )

        instance.save()
        return instance


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs.get('email') or not attrs.get('password'):
            raise serializers.ValidationError('Email y password son requeridos')
        return attrs


class IdentidadSerializer(serializers.Serializer):
    id = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
    name = serializers.CharField()
    teacherDni = serializers.CharField(allow_null=True)


class SesionSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = IdentidadSerializer()
