from django.conf import settings
from django.contrib import messages
from django.db.models import Count
from django.http import Http404
from django.shortcuts import render, redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.generic import ListView, DetailView, FormView, View

from . import handlers
from .exceptions import InventoryError
from .filters import DeviceFilter, DeviceRelationshipFilter
from .forms import DeviceForm, DeviceRelationshipForm
from .models import Device, DeviceRelationship


class HandlerFormMixin:
    """
    Run a handler from ``form_valid`` and show inventory errors
    (missing device, self-relationship) on the form instead of failing.
    """

    def run_handler(self, form, handler, *args):
        try:
            return handler(*args)
        except InventoryError as e:
            form.add_error(None, str(e))
            return None


def get_device_or_404(pk):
    device = handlers.get_device_by_id(pk)
    if device is None:
        raise Http404('Device not found')
    return device


# ============== Device Views ==============

class DeviceListView(ListView):
    """List all devices with filtering."""

    model = Device
    template_name = 'inventory/device_list.html'
    context_object_name = 'devices'
    paginate_by = settings.DEFAULT_PAGE_SIZE

    def get_queryset(self):
        self.filterset = DeviceFilter(self.request.GET, queryset=Device.objects.all())
        return self.filterset.qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['filter'] = self.filterset
        context['total_count'] = Device.objects.count()
        context['status_counts'] = dict(
            Device.objects.order_by().values_list('status').annotate(total=Count('id'))
        )
        context['device_types'] = Device.Type.choices
        return context


class DeviceDetailView(DetailView):
    """View device details and its relationships."""

    model = Device
    template_name = 'inventory/device_detail.html'
    context_object_name = 'device'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['child_relationships'] = self.object.child_relationships.select_related('child_device')
        context['parent_relationships'] = self.object.parent_relationships.select_related('parent_device')
        return context


class DeviceCreateView(HandlerFormMixin, FormView):
    """Create a new device."""

    form_class = DeviceForm
    template_name = 'inventory/device_form.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.setdefault('form_title', 'Add Device')
        return context

    def form_valid(self, form):
        device = self.run_handler(form, handlers.create_device, form.cleaned_data)
        if device is None:
            return self.form_invalid(form)
        messages.success(self.request, f'Device "{device.name}" created successfully.')
        return redirect('inventory:device_detail', pk=device.pk)


class DeviceUpdateView(FormView):
    """Update a device."""

    form_class = DeviceForm
    template_name = 'inventory/device_form.html'

    def dispatch(self, request, *args, **kwargs):
        self.device = get_device_or_404(kwargs['pk'])
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        return DeviceForm.initial_from(self.device)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['device'] = self.device
        context['form_title'] = f'Edit Device: {self.device.name}'
        return context

    def form_valid(self, form):
        device = handlers.update_device(self.device.pk, form.cleaned_data)
        if device is None:
            raise Http404('Device not found')
        messages.success(self.request, f'Device "{device.name}" updated successfully.')
        return redirect('inventory:device_detail', pk=device.pk)


class DeviceCopyView(DeviceCreateView):
    """Create a new device by copying an existing device."""

    def get_initial(self):
        """Pre-populate form with values from the source device."""
        initial = super().get_initial()
        source_device = get_device_or_404(self.kwargs['pk'])
        initial.update(DeviceForm.initial_from(source_device))
        initial['name'] = f"{source_device.name} (Copy)"
        initial['ip_address'] = ''
        return initial

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['form_title'] = f"Copy Device: {self.get_initial()['name']}"
        return context


class DeviceDeleteView(View):
    """Confirm and delete a device (its relationships are removed with it)."""

    template_name = 'inventory/device_confirm_delete.html'

    def get(self, request, pk):
        device = get_device_or_404(pk)
        return render(request, self.template_name, {
            'device': device,
            'relationship_count': device.relationships.count(),
        })

    def post(self, request, pk):
        device = get_device_or_404(pk)
        if handlers.delete_device(pk):
            messages.success(request, f'Device "{device.name}" deleted successfully.')
        else:
            messages.warning(request, f'Device "{device.name}" was already deleted.')
        return redirect('inventory:device_list')


# ============== Relationship Views ==============

class RelationshipListView(ListView):
    """List relationships, filterable by device and type."""

    model = DeviceRelationship
    template_name = 'inventory/relationship_list.html'
    context_object_name = 'relationships'
    paginate_by = settings.DEFAULT_PAGE_SIZE

    def get_queryset(self):
        queryset = DeviceRelationship.objects.select_related('parent_device', 'child_device')
        self.filterset = DeviceRelationshipFilter(self.request.GET, queryset=queryset)
        return self.filterset.qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['filter'] = self.filterset
        context['total_count'] = DeviceRelationship.objects.count()
        return context


class RelationshipCreateView(HandlerFormMixin, FormView):
    """Create a new relationship; ?parent=<id> preselects the parent device."""

    form_class = DeviceRelationshipForm
    template_name = 'inventory/relationship_form.html'

    def get_initial(self):
        initial = super().get_initial()
        parent = self.request.GET.get('parent')
        if parent and parent.isdigit():
            initial['parent_device_id'] = int(parent)
        return initial

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['form_title'] = 'Add Relationship'
        context['device_count'] = Device.objects.count()
        return context

    def form_valid(self, form):
        relationship = self.run_handler(form, handlers.create_device_relationship, form.cleaned_data)
        if relationship is None:
            return self.form_invalid(form)
        messages.success(self.request, 'Relationship created successfully.')
        return redirect('inventory:relationship_list')


class RelationshipUpdateView(HandlerFormMixin, FormView):
    """Update a relationship."""

    form_class = DeviceRelationshipForm
    template_name = 'inventory/relationship_form.html'

    def dispatch(self, request, *args, **kwargs):
        self.relationship = DeviceRelationship.objects.filter(pk=kwargs['pk']).first()
        if self.relationship is None:
            raise Http404('Relationship not found')
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        return DeviceRelationshipForm.initial_from(self.relationship)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['form_title'] = 'Edit Relationship'
        context['device_count'] = Device.objects.count()
        return context

    def form_valid(self, form):
        relationship = self.run_handler(
            form, handlers.update_device_relationship, self.relationship.pk, form.cleaned_data
        )
        if relationship is None:
            if form.errors:
                return self.form_invalid(form)
            raise Http404('Relationship not found')
        messages.success(self.request, 'Relationship updated successfully.')
        return redirect('inventory:relationship_list')


class RelationshipDeleteView(View):
    """Confirm and delete a relationship."""

    template_name = 'inventory/relationship_confirm_delete.html'

    def get_relationship(self, pk):
        relationship = DeviceRelationship.objects.select_related(
            'parent_device', 'child_device'
        ).filter(pk=pk).first()
        if relationship is None:
            raise Http404('Relationship not found')
        return relationship

    def get(self, request, pk):
        return render(request, self.template_name, {
            'relationship': self.get_relationship(pk),
        })

    def post(self, request, pk):
        self.get_relationship(pk)
        handlers.delete_device_relationship(pk)
        messages.success(request, 'Relationship deleted successfully.')
        next_url = request.POST.get('next')
        if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
            return redirect(next_url)
        return redirect(reverse('inventory:relationship_list'))
