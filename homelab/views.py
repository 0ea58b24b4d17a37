"""
Main views for Home Lab Inventory
"""

from django.db.models import Count
from django.views.generic import TemplateView

from homelab.inventory.models import Device, DeviceRelationship


class DashboardView(TemplateView):
    """Main dashboard view showing inventory overview."""

    template_name = 'dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        status_counts = dict(
            Device.objects.order_by().values_list('status').annotate(total=Count('id'))
        )

        context['stats'] = {
            'total_devices': Device.objects.count(),
            'online_devices': status_counts.get(Device.Status.ONLINE, 0),
            'offline_devices': status_counts.get(Device.Status.OFFLINE, 0),
            'maintenance_devices': status_counts.get(Device.Status.MAINTENANCE, 0),
            'error_devices': status_counts.get(Device.Status.ERROR, 0),
            'total_relationships': DeviceRelationship.objects.count(),
        }

        # Devices needing attention
        context['devices_with_issues'] = Device.objects.filter(
            status__in=[Device.Status.ERROR, Device.Status.MAINTENANCE]
        ).order_by('-updated_at')[:5]

        # Recently changed devices
        context['recent_devices'] = Device.objects.order_by('-updated_at')[:5]

        return context
