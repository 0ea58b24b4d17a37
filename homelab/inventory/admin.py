"""
Inventory Admin

Day-to-day inventory management happens in the web UI:
  - Devices: /inventory/devices/
  - Relationships: /inventory/relationships/
The admin is a read-mostly fallback for bulk inspection.
"""

from django.contrib import admin

from .models import Device, DeviceRelationship


class ChildRelationshipInline(admin.TabularInline):
    model = DeviceRelationship
    fk_name = 'parent_device'
    extra = 0
    verbose_name = 'Child relationship'
    verbose_name_plural = 'Child relationships'


@admin.register(Device)
class DeviceAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'ip_address', 'status', 'updated_at']
    list_filter = ['type', 'status']
    search_fields = ['name', 'ip_address', 'make', 'model']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ChildRelationshipInline]


@admin.register(DeviceRelationship)
class DeviceRelationshipAdmin(admin.ModelAdmin):
    list_display = ['parent_device', 'relationship_type', 'child_device', 'created_at']
    list_filter = ['relationship_type']
    list_select_related = ['parent_device', 'child_device']
    readonly_fields = ['created_at']
