"""
Management command to seed a small demo home lab.
Devices are matched by name, so running it twice changes nothing.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from homelab.inventory import handlers
from homelab.inventory.models import Device, DeviceRelationship


DEMO_DEVICES = [
    {'name': 'hypervisor-01', 'type': 'physical_server', 'ip_address': '192.168.1.10',
     'make': 'Dell', 'model': 'PowerEdge R740', 'operating_system': 'Proxmox VE 8',
     'cpu': 'Intel Xeon Silver 4214', 'ram': 128, 'storage_capacity': 2000, 'status': 'online'},
    {'name': 'web-vm', 'type': 'virtual_machine', 'ip_address': '192.168.1.21',
     'operating_system': 'Ubuntu 24.04', 'ram': 4, 'storage_capacity': 64, 'status': 'online'},
    {'name': 'db-vm', 'type': 'virtual_machine', 'ip_address': '192.168.1.22',
     'operating_system': 'Debian 12', 'ram': 8, 'storage_capacity': 128, 'status': 'online'},
    {'name': 'edge-router', 'type': 'router', 'ip_address': '192.168.1.1',
     'make': 'Ubiquiti', 'model': 'EdgeRouter 4', 'status': 'online'},
    {'name': 'core-switch', 'type': 'switch', 'ip_address': '192.168.1.2',
     'make': 'MikroTik', 'model': 'CRS326', 'status': 'online'},
    {'name': 'living-room-ap', 'type': 'access_point', 'ip_address': '192.168.1.3',
     'make': 'Ubiquiti', 'model': 'U6 Lite', 'status': 'maintenance'},
    {'name': 'nas-01', 'type': 'storage', 'ip_address': '192.168.1.30',
     'make': 'Synology', 'model': 'DS920+', 'storage_capacity': 16000, 'status': 'online'},
]

# (parent, relationship, child)
DEMO_RELATIONSHIPS = [
    ('hypervisor-01', 'hosted_on', 'web-vm'),
    ('hypervisor-01', 'hosted_on', 'db-vm'),
    ('edge-router', 'connected_to', 'core-switch'),
    ('core-switch', 'connected_to', 'hypervisor-01'),
    ('core-switch', 'connected_to', 'nas-01'),
    ('core-switch', 'connected_to', 'living-room-ap'),
    ('nas-01', 'stores_on', 'db-vm'),
]


class Command(BaseCommand):
    help = 'Seed a demo home lab (servers, VMs, network gear, storage)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all devices and relationships before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Device.objects.all().delete()
            self.stdout.write(self.style.WARNING(f'Cleared {deleted} inventory rows'))

        created_devices = 0
        devices = {}
        for data in DEMO_DEVICES:
            device = Device.objects.filter(name=data['name']).first()
            if device is None:
                device = handlers.create_device(data)
                created_devices += 1
                self.stdout.write(f"  Created: {device.name}")
            devices[device.name] = device

        created_relationships = 0
        for parent_name, relationship_type, child_name in DEMO_RELATIONSHIPS:
            parent = devices[parent_name]
            child = devices[child_name]
            exists = DeviceRelationship.objects.filter(
                parent_device=parent,
                child_device=child,
                relationship_type=relationship_type,
            ).exists()
            if not exists:
                handlers.create_device_relationship({
                    'parent_device_id': parent.pk,
                    'child_device_id': child.pk,
                    'relationship_type': relationship_type,
                })
                created_relationships += 1

        self.stdout.write(self.style.SUCCESS(
            f'\nDone! Created {created_devices} devices and {created_relationships} relationships.'
        ))
