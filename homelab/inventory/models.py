"""
Inventory models - Devices and the directed relationships between them
"""

from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address
from django.db import models

from .exceptions import SELF_RELATIONSHIP_MESSAGE


def validate_positive(value):
    """Reject zero and negative capacities (RAM, storage)."""
    if value is not None and value <= 0:
        raise ValidationError(
            'Ensure this value is greater than 0.',
            code='min_value',
            params={'value': value},
        )


class Device(models.Model):
    """
    A physical or virtual asset in the home lab.
    """

    class Type(models.TextChoices):
        PHYSICAL_SERVER = 'physical_server', 'Physical Server'
        VIRTUAL_MACHINE = 'virtual_machine', 'Virtual Machine'
        ROUTER = 'router', 'Router'
        SWITCH = 'switch', 'Switch'
        ACCESS_POINT = 'access_point', 'Access Point'
        STORAGE = 'storage', 'Storage'

    class Status(models.TextChoices):
        ONLINE = 'online', 'Online'
        OFFLINE = 'offline', 'Offline'
        MAINTENANCE = 'maintenance', 'Maintenance'
        ERROR = 'error', 'Error'

    # Basic info
    name = models.CharField(
        max_length=255,
        help_text='Hostname or friendly name'
    )
    type = models.CharField(
        max_length=20,
        choices=Type.choices,
    )
    # Stored exactly as entered, IPv6 spelling included
    ip_address = models.CharField(
        max_length=45,
        null=True,
        blank=True,
        validators=[validate_ipv46_address],
        help_text='IPv4 or IPv6 address'
    )

    # Hardware / platform
    make = models.CharField(max_length=255, null=True, blank=True)
    model = models.CharField(max_length=255, null=True, blank=True)
    operating_system = models.CharField(max_length=255, null=True, blank=True)
    cpu = models.CharField(max_length=255, null=True, blank=True)
    ram = models.FloatField(
        null=True,
        blank=True,
        validators=[validate_positive],
        help_text='RAM in GB'
    )
    storage_capacity = models.FloatField(
        null=True,
        blank=True,
        validators=[validate_positive],
        help_text='Storage capacity in GB'
    )

    # Status
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.OFFLINE
    )
    notes = models.TextField(null=True, blank=True)

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Device'
        verbose_name_plural = 'Devices'
        ordering = ['id']

    def __str__(self):
        if self.ip_address:
            return f"{self.name} ({self.ip_address})"
        return self.name

    @property
    def type_display(self):
        """Return device type display name."""
        return self.get_type_display()

    @property
    def relationships(self):
        """All relationships where this device is either parent or child."""
        return DeviceRelationship.objects.involving(self.pk)


class DeviceRelationshipQuerySet(models.QuerySet):

    def involving(self, device_id):
        """Relationships where the device is the parent or the child."""
        return self.filter(
            models.Q(parent_device_id=device_id) | models.Q(child_device_id=device_id)
        )

    def of_type(self, relationship_type):
        return self.filter(relationship_type=relationship_type)


class DeviceRelationship(models.Model):
    """
    Directed, typed link between two devices (parent -> child).
    Removed automatically when either device is deleted.
    """

    class Type(models.TextChoices):
        HOSTED_ON = 'hosted_on', 'Hosted On'
        CONNECTED_TO = 'connected_to', 'Connected To'
        MANAGES = 'manages', 'Manages'
        STORES_ON = 'stores_on', 'Stores On'

    parent_device = models.ForeignKey(
        Device,
        on_delete=models.CASCADE,
        related_name='child_relationships',
    )
    child_device = models.ForeignKey(
        Device,
        on_delete=models.CASCADE,
        related_name='parent_relationships',
    )
    relationship_type = models.CharField(
        max_length=20,
        choices=Type.choices,
    )
    description = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = DeviceRelationshipQuerySet.as_manager()

    class Meta:
        verbose_name = 'Device Relationship'
        verbose_name_plural = 'Device Relationships'
        ordering = ['id']

    def __str__(self):
        return f"{self.parent_device_id} -[{self.relationship_type}]-> {self.child_device_id}"

    def clean(self):
        super().clean()
        if self.parent_device_id is not None and self.parent_device_id == self.child_device_id:
            raise ValidationError({'child_device': SELF_RELATIONSHIP_MESSAGE})
