# tests/test_handlers_devices.py
import logging
from datetime import timedelta

import pytest

from homelab.inventory import handlers, schemas
from homelab.inventory.models import Device, DeviceRelationship
from homelab.inventory.serializers import serialize_device

pytestmark = pytest.mark.django_db


def test_create_device_with_name_and_type_only(make_device):
    device = make_device('edge', 'router')

    assert device.pk is not None
    assert device.status == Device.Status.OFFLINE
    for field in ('ip_address', 'make', 'model', 'operating_system', 'cpu', 'ram', 'storage_capacity', 'notes'):
        assert getattr(device, field) is None
    assert device.created_at is not None


def test_create_device_keeps_all_fields(make_device):
    device = make_device(
        'hypervisor-01', 'physical_server',
        ip_address='10.0.0.5', make='Dell', model='R740', operating_system='Proxmox',
        cpu='Xeon', ram=128, storage_capacity=2000.5, status='online', notes='rack 2',
    )
    stored = Device.objects.get(pk=device.pk)
    assert stored.make == 'Dell'
    assert stored.ram == 128
    assert stored.storage_capacity == 2000.5
    assert stored.status == 'online'
    assert stored.notes == 'rack 2'


def test_create_device_logs(make_device, caplog):
    with caplog.at_level(logging.INFO, logger='homelab.inventory'):
        device = make_device('logged')
    assert f"Created device {device.pk} (logged)" in caplog.text


def test_create_device_rejects_unknown_type():
    with pytest.raises(ValueError):
        handlers.create_device({'name': 'x', 'type': 'toaster'})
    assert Device.objects.count() == 0


def test_get_devices_returns_all_in_id_order(make_device):
    first = make_device('b')
    second = make_device('a')
    assert handlers.get_devices() == [first, second]


def test_get_devices_empty():
    assert handlers.get_devices() == []


def test_get_devices_by_type(make_device):
    make_device('srv', 'physical_server')
    vm1 = make_device('vm1', 'virtual_machine')
    vm2 = make_device('vm2', 'virtual_machine')

    assert handlers.get_devices_by_type('virtual_machine') == [vm1, vm2]
    assert handlers.get_devices_by_type('storage') == []


def test_get_device_by_id(make_device):
    device = make_device()
    assert handlers.get_device_by_id(device.pk) == device
    assert handlers.get_device_by_id(99999) is None


def test_update_device_changes_only_patched_fields(make_device):
    device = make_device('srv', ip_address='10.0.0.1', notes='keep me')

    updated = handlers.update_device(device.pk, {'status': 'online'})

    assert updated.status == 'online'
    assert updated.ip_address == '10.0.0.1'
    assert updated.notes == 'keep me'
    assert updated.updated_at >= device.updated_at


def test_update_device_refreshes_updated_at(make_device):
    device = make_device()
    Device.objects.filter(pk=device.pk).update(updated_at=device.created_at.replace(year=2000))

    updated = handlers.update_device(device.pk, {'name': 'renamed'})

    assert updated.name == 'renamed'
    assert updated.updated_at.year != 2000


def test_update_device_can_clear_optional_field(make_device):
    device = make_device(notes='old')
    updated = handlers.update_device(device.pk, {'notes': None})
    assert updated.notes is None


def test_update_device_empty_patch_returns_none(make_device):
    device = make_device('unchanged')
    assert handlers.update_device(device.pk, {}) is None
    assert Device.objects.get(pk=device.pk).name == 'unchanged'


def test_update_missing_device_returns_none():
    assert handlers.update_device(99999, {'name': 'ghost'}) is None


def test_delete_device(make_device):
    device = make_device()
    assert handlers.delete_device(device.pk) is True
    assert handlers.get_device_by_id(device.pk) is None
    assert handlers.delete_device(device.pk) is False


def test_delete_device_removes_its_relationships(homelab):
    assert handlers.delete_device(homelab['hypervisor'].pk) is True

    assert DeviceRelationship.objects.count() == 0
    assert handlers.get_device_relationships(device_id=homelab['vm'].pk) == []


def test_update_device_leaves_other_columns_untouched(make_device):
    device = make_device(
        'nas-01', 'storage',
        ip_address='10.0.0.9', make='Synology', model='DS920+', cpu='Celeron J4125',
        ram=4, storage_capacity=16000,
    )
    # Push the stored timestamp back so the refresh is visible at any clock resolution
    Device.objects.filter(pk=device.pk).update(updated_at=device.updated_at - timedelta(seconds=1))
    stored = Device.objects.get(pk=device.pk)
    before = serialize_device(stored)

    updated = handlers.update_device(device.pk, {'status': 'online'})

    assert updated.updated_at > stored.updated_at
    after = serialize_device(updated)
    assert after['status'] == 'online'
    for field in before:
        if field not in ('status', 'updated_at'):
            assert after[field] == before[field], field
    assert after['operating_system'] is None
    assert after['notes'] is None


def test_update_device_keeps_nullable_columns_null(make_device):
    device = make_device('bare', 'switch')
    before = serialize_device(device)

    updated = handlers.update_device(device.pk, {'name': 'bare-renamed'})

    after = serialize_device(updated)
    for field in ('ip_address', 'make', 'model', 'operating_system', 'cpu', 'ram', 'storage_capacity', 'notes'):
        assert after[field] is None
    assert after['created_at'] == before['created_at']
    assert after['type'] == before['type']
    assert after['status'] == before['status']


# ============== Stored exactly as sent ==============

def _create_from_json(data):
    return handlers.create_device(schemas.validate(schemas.CreateDeviceInput, data))


def test_round_trip_keeps_name_whitespace():
    device = _create_from_json({'name': '  web-01 ', 'type': 'virtual_machine'})
    assert handlers.get_device_by_id(device.pk).name == '  web-01 '


def test_round_trip_keeps_empty_text():
    device = _create_from_json({'name': 'x', 'type': 'router', 'make': '', 'notes': '', 'cpu': None})

    stored = handlers.get_device_by_id(device.pk)
    assert stored.make == ''
    assert stored.notes == ''
    assert stored.cpu is None
    assert stored.model is None


def test_round_trip_keeps_ipv6_spelling():
    device = _create_from_json({'name': 'x', 'type': 'router', 'ip_address': '2001:0DB8:0000::1'})
    assert handlers.get_device_by_id(device.pk).ip_address == '2001:0DB8:0000::1'


def test_update_round_trip_keeps_empty_text(make_device):
    device = make_device(notes='old')
    data = schemas.validate(schemas.UpdateDeviceInput, {'id': device.pk, 'notes': ''})

    handlers.update_device(data['id'], data['patch'])

    assert handlers.get_device_by_id(device.pk).notes == ''
