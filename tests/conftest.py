# tests/conftest.py
import json

import pytest

from homelab.inventory import handlers


@pytest.fixture
def make_device(db):
    """Factory creating devices through the handler, like the RPC layer does."""
    def _make_device(name='server-01', type='physical_server', **fields):
        return handlers.create_device({'name': name, 'type': type, **fields})
    return _make_device


@pytest.fixture
def make_relationship(db):
    def _make_relationship(parent, child, relationship_type='hosted_on', **fields):
        return handlers.create_device_relationship({
            'parent_device_id': parent.pk,
            'child_device_id': child.pk,
            'relationship_type': relationship_type,
            **fields,
        })
    return _make_relationship


@pytest.fixture
def rpc(client):
    """Call a procedure over HTTP: queries as GET, mutations as POST."""
    def _rpc(name, data=None, method=None, **extra):
        if method is None:
            method = 'get' if name.startswith(('get', 'health')) else 'post'
        url = f'/rpc/{name}'
        if method == 'get':
            params = {} if data is None else {'input': json.dumps(data)}
            return client.get(url, params, **extra)
        body = '' if data is None else json.dumps(data)
        return client.post(url, body, content_type='application/json', **extra)
    return _rpc


@pytest.fixture
def homelab(make_device, make_relationship):
    """A small lab: hypervisor hosting a VM, switch connected to the hypervisor."""
    hypervisor = make_device('hypervisor-01', 'physical_server', status='online')
    vm = make_device('web-vm', 'virtual_machine', ip_address='192.168.1.21')
    switch = make_device('core-switch', 'switch')
    hosted = make_relationship(hypervisor, vm, 'hosted_on')
    connected = make_relationship(switch, hypervisor, 'connected_to')
    return {
        'hypervisor': hypervisor,
        'vm': vm,
        'switch': switch,
        'hosted': hosted,
        'connected': connected,
    }
