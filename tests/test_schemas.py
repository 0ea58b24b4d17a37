# tests/test_schemas.py
import pytest

from homelab.inventory import schemas
from homelab.inventory.exceptions import InputValidationError


def test_create_device_minimal_input():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'srv', 'type': 'router'})
    assert data['name'] == 'srv'
    assert data['type'] == 'router'
    assert data['status'] == 'offline'
    assert data['ip_address'] is None
    assert data['make'] is None
    assert data['ram'] is None


def test_create_device_requires_name():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'type': 'router'})
    assert exc_info.value.errors['name'] == ['Name is required']


def test_create_device_rejects_blank_name():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': '', 'type': 'router'})
    assert 'name' in exc_info.value.errors


def test_create_device_rejects_unknown_type():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'toaster'})
    assert 'type' in exc_info.value.errors


def test_create_device_rejects_unknown_status():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'status': 'asleep'})
    assert 'status' in exc_info.value.errors


def test_ip_address_empty_string_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'ip_address': ''})
    assert exc_info.value.errors['ip_address'] == ['IP address cannot be empty string']


def test_ip_address_null_allowed():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'ip_address': None})
    assert data['ip_address'] is None


@pytest.mark.parametrize('address', ['192.168.1.10', '::1', 'fe80::1'])
def test_ip_address_accepts_ipv4_and_ipv6(address):
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'ip_address': address})
    assert data['ip_address'] == address


def test_ip_address_rejects_garbage():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'ip_address': '999.1.1.1'})
    assert 'ip_address' in exc_info.value.errors


@pytest.mark.parametrize('field', ['ram', 'storage_capacity'])
@pytest.mark.parametrize('value', [0, -1])
def test_capacities_must_be_positive(field, value):
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'storage', field: value})
    assert field in exc_info.value.errors


def test_capacities_accept_fractions():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'storage', 'ram': 0.5})
    assert data['ram'] == 0.5


def test_update_device_patch_holds_only_present_keys():
    data = schemas.validate(schemas.UpdateDeviceInput, {'id': 3, 'notes': None, 'status': 'online'})
    assert data == {'id': 3, 'patch': {'notes': None, 'status': 'online'}}


def test_update_device_with_only_id_gives_empty_patch():
    data = schemas.validate(schemas.UpdateDeviceInput, {'id': 3})
    assert data == {'id': 3, 'patch': {}}


@pytest.mark.parametrize('field', ['name', 'type', 'status'])
def test_update_device_required_columns_cannot_be_cleared(field):
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.UpdateDeviceInput, {'id': 1, field: None})
    assert field in exc_info.value.errors


def test_update_device_requires_id():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.UpdateDeviceInput, {'name': 'x'})
    assert 'id' in exc_info.value.errors


def test_update_device_rejects_empty_ip():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.UpdateDeviceInput, {'id': 1, 'ip_address': ''})
    assert 'ip_address' in exc_info.value.errors


def test_create_relationship_rejects_self_pair():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceRelationshipInput, {
            'parent_device_id': 4,
            'child_device_id': 4,
            'relationship_type': 'manages',
        })
    assert exc_info.value.errors['child_device_id'] == ['A device cannot have a relationship with itself']


def test_create_relationship_rejects_unknown_type():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceRelationshipInput, {
            'parent_device_id': 1,
            'child_device_id': 2,
            'relationship_type': 'owns',
        })
    assert 'relationship_type' in exc_info.value.errors


def test_get_device_relationships_filters_are_optional():
    data = schemas.validate(schemas.GetDeviceRelationshipsInput, None)
    assert data['device_id'] is None
    assert data['relationship_type'] is None


def test_update_relationship_patch():
    data = schemas.validate(schemas.UpdateDeviceRelationshipInput, {'id': 2, 'description': None})
    assert data == {'id': 2, 'patch': {'description': None}}


def test_non_object_input_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.GetDeviceByIdInput, [1, 2])
    assert exc_info.value.errors == {'__all__': ['Expected an object.']}


def test_error_message_summarises_fields():
    error = InputValidationError({'name': ['Name is required'], '__all__': ['Bad']})
    assert str(error) == 'Invalid input - name: Name is required, input: Bad'


# ============== Values kept as sent ==============

def test_name_is_not_trimmed():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': '  web-01 ', 'type': 'router'})
    assert data['name'] == '  web-01 '


def test_whitespace_name_is_accepted():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': ' ', 'type': 'router'})
    assert data['name'] == ' '


@pytest.mark.parametrize('field', ['make', 'model', 'operating_system', 'cpu', 'notes'])
def test_empty_text_stays_empty(field):
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', field: ''})
    assert data[field] == ''


def test_null_text_is_none():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'make': None})
    assert data['make'] is None


def test_ipv6_spelling_is_kept():
    data = schemas.validate(
        schemas.CreateDeviceInput,
        {'name': 'x', 'type': 'router', 'ip_address': '2001:0DB8:0000::1'},
    )
    assert data['ip_address'] == '2001:0DB8:0000::1'


def test_update_patch_keeps_empty_text():
    data = schemas.validate(schemas.UpdateDeviceInput, {'id': 1, 'cpu': ''})
    assert data['patch'] == {'cpu': ''}


def test_relationship_description_empty_string_kept():
    data = schemas.validate(schemas.CreateDeviceRelationshipInput, {
        'parent_device_id': 1,
        'child_device_id': 2,
        'relationship_type': 'manages',
        'description': '',
    })
    assert data['description'] == ''


# ============== JSON types ==============

def test_numeric_name_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 123, 'type': 'router'})
    assert exc_info.value.errors == {'name': ['Expected a string.']}


@pytest.mark.parametrize('field', ['ram', 'storage_capacity'])
def test_string_capacity_rejected(field):
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'storage', field: '16'})
    assert exc_info.value.errors == {field: ['Expected a number.']}


def test_integer_capacity_accepted():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'storage', 'ram': 16})
    assert data['ram'] == 16.0


@pytest.mark.parametrize('value', ['5', 5.5, True])
def test_id_must_be_an_integer(value):
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.GetDeviceByIdInput, {'id': value})
    assert exc_info.value.errors == {'id': ['Expected an integer.']}


def test_relationship_ids_must_be_integers():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceRelationshipInput, {
            'parent_device_id': '1',
            'child_device_id': 2,
            'relationship_type': 'manages',
        })
    assert exc_info.value.errors == {'parent_device_id': ['Expected an integer.']}


def test_non_string_enum_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.GetDevicesByTypeInput, {'type': 1})
    assert exc_info.value.errors == {'type': ['Expected a string.']}


def test_empty_status_on_create_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'status': ''})
    assert 'status' in exc_info.value.errors


def test_null_status_on_create_defaults_to_offline():
    data = schemas.validate(schemas.CreateDeviceInput, {'name': 'x', 'type': 'router', 'status': None})
    assert data['status'] == 'offline'
