"""
Input schemas for every inventory procedure.

Each schema is a plain Django form bound to the JSON-decoded input.
``validate()`` returns the cleaned values or raises InputValidationError
with the offending fields. Update schemas return a patch holding only the
keys that were present in the input, so ``{"notes": null}`` clears a field
while a missing ``notes`` key leaves it untouched.

Values are stored as sent: strings are not trimmed, ``""`` stays ``""``
and IP addresses keep their spelling. Only the name and the IP address
reject an empty string.
"""

from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address

from .exceptions import InputValidationError, SELF_RELATIONSHIP_MESSAGE
from .models import Device, DeviceRelationship, validate_positive


class NullableCharField(forms.CharField):
    """Optional, unstripped text: null or absent is None, ``""`` stays ``""``."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('strip', False)
        kwargs.setdefault('empty_value', '')
        super().__init__(**kwargs)

    def to_python(self, value):
        if value is None:
            return None
        return super().to_python(value)


def _optional_capacity():
    return forms.FloatField(required=False, validators=[validate_positive])


def _object_id(required=True):
    return forms.IntegerField(required=required, min_value=1)


# JSON type each field kind accepts; FloatField before its IntegerField base
JSON_TYPES = (
    (forms.FloatField, (int, float), 'Expected a number.'),
    (forms.IntegerField, (int,), 'Expected an integer.'),
    (forms.CharField, (str,), 'Expected a string.'),
    (forms.ChoiceField, (str,), 'Expected a string.'),
)


def json_type_errors(schema_class, data):
    """Fields whose raw JSON value has the wrong type (no coercion of "16" or 123)."""
    errors = {}
    for name, field in schema_class.base_fields.items():
        value = data.get(name)
        if value is None:
            continue
        for field_class, types, message in JSON_TYPES:
            if isinstance(field, field_class):
                if isinstance(value, bool) or not isinstance(value, types):
                    errors[name] = [message]
                break
    return errors


class InputSchema(forms.Form):
    """Base schema: cleaned_data is the validated value."""

    def validated(self):
        return self.cleaned_data


class PatchSchema(InputSchema):
    """
    Schema for partial updates.

    Fields listed in ``non_nullable`` may be omitted but not cleared.
    """

    non_nullable = ()

    def clean(self):
        cleaned_data = super().clean()
        for name in self.non_nullable:
            if name in self.errors or name not in self.data:
                continue
            if cleaned_data.get(name) in (None, ''):
                self.add_error(name, ValidationError('This field cannot be null or blank.', code='null'))
        return cleaned_data

    def validated(self):
        patch = {
            name: value
            for name, value in self.cleaned_data.items()
            if name != 'id' and name in self.data
        }
        return {'id': self.cleaned_data['id'], 'patch': patch}


# ============== Devices ==============

class DeviceFieldsMixin(forms.Form):
    """Fields shared by device create and update."""

    ip_address = NullableCharField(validators=[validate_ipv46_address])
    make = NullableCharField()
    model = NullableCharField()
    operating_system = NullableCharField()
    cpu = NullableCharField()
    ram = _optional_capacity()
    storage_capacity = _optional_capacity()
    notes = NullableCharField()

    def clean_ip_address(self):
        # Omitted or null is fine, an explicit empty string is not
        if self.data.get('ip_address') == '':
            raise ValidationError('IP address cannot be empty string', code='empty')
        return self.cleaned_data.get('ip_address')


class CreateDeviceInput(DeviceFieldsMixin, InputSchema):
    name = forms.CharField(strip=False, error_messages={'required': 'Name is required'})
    type = forms.ChoiceField(choices=Device.Type.choices)
    status = forms.ChoiceField(choices=Device.Status.choices, required=False)

    field_order = [
        'name', 'type', 'ip_address', 'make', 'model', 'operating_system',
        'cpu', 'ram', 'storage_capacity', 'status', 'notes',
    ]

    def clean_status(self):
        if self.data.get('status') == '':
            raise ValidationError('Select a valid status.', code='invalid_choice')
        return self.cleaned_data.get('status') or Device.Status.OFFLINE


class UpdateDeviceInput(DeviceFieldsMixin, PatchSchema):
    id = _object_id()
    name = forms.CharField(required=False, strip=False)
    type = forms.ChoiceField(choices=Device.Type.choices, required=False)
    status = forms.ChoiceField(choices=Device.Status.choices, required=False)

    non_nullable = ('name', 'type', 'status')


class GetDeviceByIdInput(InputSchema):
    id = _object_id()


class DeleteDeviceInput(InputSchema):
    id = _object_id()


class GetDevicesByTypeInput(InputSchema):
    type = forms.ChoiceField(choices=Device.Type.choices)


# ============== Relationships ==============

class CreateDeviceRelationshipInput(InputSchema):
    parent_device_id = _object_id()
    child_device_id = _object_id()
    relationship_type = forms.ChoiceField(choices=DeviceRelationship.Type.choices)
    description = NullableCharField()

    def clean(self):
        cleaned_data = super().clean()
        parent_id = cleaned_data.get('parent_device_id')
        child_id = cleaned_data.get('child_device_id')
        if parent_id is not None and parent_id == child_id:
            self.add_error('child_device_id', ValidationError(SELF_RELATIONSHIP_MESSAGE, code='self'))
        return cleaned_data


class UpdateDeviceRelationshipInput(PatchSchema):
    id = _object_id()
    parent_device_id = _object_id(required=False)
    child_device_id = _object_id(required=False)
    relationship_type = forms.ChoiceField(choices=DeviceRelationship.Type.choices, required=False)
    description = NullableCharField()

    non_nullable = ('parent_device_id', 'child_device_id', 'relationship_type')


class GetDeviceRelationshipsInput(InputSchema):
    device_id = _object_id(required=False)
    relationship_type = forms.ChoiceField(choices=DeviceRelationship.Type.choices, required=False)

    def clean_relationship_type(self):
        return self.cleaned_data.get('relationship_type') or None


class DeleteDeviceRelationshipInput(InputSchema):
    id = _object_id()


def error_dict(form):
    """Flatten form errors to {field: [message, ...]}."""
    return {
        field: [error['message'] for error in errors]
        for field, errors in form.errors.get_json_data().items()
    }


def validate(schema_class, data):
    """
    Validate procedure input against ``schema_class``.

    Returns the schema's validated value (a dict) or raises
    InputValidationError.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InputValidationError({'__all__': ['Expected an object.']})

    type_errors = json_type_errors(schema_class, data)
    if type_errors:
        raise InputValidationError(type_errors)

    form = schema_class(data=data)
    if not form.is_valid():
        raise InputValidationError(error_dict(form))
    return form.validated()
