#core/fields.py

from rest_framework import serializers


class GradoField(serializers.Field):
    """
    Grado escolar: número 1-6 o "ALL" (todos los grados).
    Se guarda como texto y se expone como número cuando lo es.
    """
    default_error_messages = {
        'invalid': 'Grado invalido',
    }

    def __init__(self, allow_all=True, **kwargs):
        self.allow_all = allow_all
        super().__init__(**kwargs)

    def to_representation(self, value):
        value = str(value)
        return int(value) if value.isdigit() else value

    def to_internal_value(self, data):
        value = str(data).strip().upper()
        if value == 'ALL' and self.allow_all:
            return value
        if value.isdigit() and 1 <= int(value) <= 6:
            return str(int(value))
        self.fail('invalid')
