from django import forms
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Submit, Row, Column, Fieldset, HTML, Div

from .models import Device
from .schemas import CreateDeviceInput, CreateDeviceRelationshipInput

BLANK_AS_NULL_FIELDS = ('make', 'model', 'operating_system', 'cpu', 'notes')


class DeviceForm(CreateDeviceInput):
    """
    Form for creating/editing devices.

    Validates exactly like the createDevice procedure, except that blank
    text boxes (IP address included) mean "not set".
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.fields['status'].required = True
        self.fields['status'].initial = Device.Status.OFFLINE
        # HTML forms cannot send null: a blank box means "not set"
        for name in BLANK_AS_NULL_FIELDS:
            self.fields[name].empty_value = None
        self.fields['notes'].widget = forms.Textarea(attrs={'rows': 3})
        self.fields['ram'].label = 'RAM (GB)'
        self.fields['storage_capacity'].label = 'Storage (GB)'
        self.fields['ip_address'].label = 'IP Address'
        self.fields['cpu'].label = 'CPU'
        self.fields['operating_system'].label = 'Operating System'

        self.helper = FormHelper()
        self.helper.layout = Layout(
            Fieldset(
                'Basic Information',
                Row(
                    Column('name', css_class='col-md-6'),
                    Column('type', css_class='col-md-6'),
                ),
                Row(
                    Column('ip_address', css_class='col-md-6'),
                    Column('status', css_class='col-md-6'),
                ),
            ),
            Fieldset(
                'Hardware',
                Row(
                    Column('make', css_class='col-md-6'),
                    Column('model', css_class='col-md-6'),
                ),
                Row(
                    Column('operating_system', css_class='col-md-6'),
                    Column('cpu', css_class='col-md-6'),
                ),
                Row(
                    Column('ram', css_class='col-md-6'),
                    Column('storage_capacity', css_class='col-md-6'),
                ),
            ),
            Fieldset(
                'Notes',
                'notes',
            ),
            Div(
                Submit('submit', 'Save Device', css_class='btn-primary'),
                HTML('<a href="{% url \'inventory:device_list\' %}" class="btn btn-secondary ms-2">Cancel</a>'),
                css_class='mt-4'
            ),
        )

    def clean_ip_address(self):
        return self.cleaned_data.get('ip_address') or None

    @classmethod
    def initial_from(cls, device):
        """Initial form values for editing or copying ``device``."""
        return {
            'name': device.name,
            'type': device.type,
            'ip_address': device.ip_address or '',
            'make': device.make or '',
            'model': device.model or '',
            'operating_system': device.operating_system or '',
            'cpu': device.cpu or '',
            'ram': device.ram,
            'storage_capacity': device.storage_capacity,
            'status': device.status,
            'notes': device.notes or '',
        }


class DeviceRelationshipForm(CreateDeviceRelationshipInput):
    """
    Form for creating/editing relationships.

    Devices are picked by name; parent and child must differ.
    """

    parent_device_id = forms.TypedChoiceField(coerce=int, label='Parent Device')
    child_device_id = forms.TypedChoiceField(coerce=int, label='Child Device')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        device_choices = [('', '-- Select Device --')] + [
            (device.pk, str(device)) for device in Device.objects.order_by('name')
        ]
        self.fields['parent_device_id'].choices = device_choices
        self.fields['child_device_id'].choices = device_choices
        self.fields['relationship_type'].label = 'Relationship'
        self.fields['description'].empty_value = None
        self.fields['description'].widget = forms.Textarea(attrs={'rows': 2})

        self.helper = FormHelper()
        self.helper.layout = Layout(
            Fieldset(
                'Relationship',
                Row(
                    Column('parent_device_id', css_class='col-md-4'),
                    Column('relationship_type', css_class='col-md-4'),
                    Column('child_device_id', css_class='col-md-4'),
                ),
                'description',
                HTML('<p class="text-muted small">Read as: parent &rarr; relationship &rarr; child '
                     '(e.g. "web-vm" hosted on "hypervisor-01").</p>'),
            ),
            Div(
                Submit('submit', 'Save Relationship', css_class='btn-primary'),
                HTML('<a href="{% url \'inventory:relationship_list\' %}" class="btn btn-secondary ms-2">Cancel</a>'),
                css_class='mt-4'
            ),
        )

    @classmethod
    def initial_from(cls, relationship):
        return {
            'parent_device_id': relationship.parent_device_id,
            'child_device_id': relationship.child_device_id,
            'relationship_type': relationship.relationship_type,
            'description': relationship.description or '',
        }
