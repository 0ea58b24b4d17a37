# Generated manually for version control
# Home Lab Inventory - Inventory Initial Migration

from django.db import migrations, models
import django.db.models.deletion
import homelab.inventory.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Device',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Hostname or friendly name', max_length=255)),
                ('type', models.CharField(choices=[('physical_server', 'Physical Server'), ('virtual_machine', 'Virtual Machine'), ('router', 'Router'), ('switch', 'Switch'), ('access_point', 'Access Point'), ('storage', 'Storage')], max_length=20)),
                ('ip_address', models.GenericIPAddressField(blank=True, help_text='IPv4 or IPv6 address', null=True)),
                ('make', models.CharField(blank=True, max_length=255, null=True)),
                ('model', models.CharField(blank=True, max_length=255, null=True)),
                ('operating_system', models.CharField(blank=True, max_length=255, null=True)),
                ('cpu', models.CharField(blank=True, max_length=255, null=True)),
                ('ram', models.FloatField(blank=True, help_text='RAM in GB', null=True, validators=[homelab.inventory.models.validate_positive])),
                ('storage_capacity', models.FloatField(blank=True, help_text='Storage capacity in GB', null=True, validators=[homelab.inventory.models.validate_positive])),
                ('status', models.CharField(choices=[('online', 'Online'), ('offline', 'Offline'), ('maintenance', 'Maintenance'), ('error', 'Error')], default='offline', max_length=20)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Device',
                'verbose_name_plural': 'Devices',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='DeviceRelationship',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('relationship_type', models.CharField(choices=[('hosted_on', 'Hosted On'), ('connected_to', 'Connected To'), ('manages', 'Manages'), ('stores_on', 'Stores On')], max_length=20)),
                ('description', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('child_device', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='parent_relationships', to='inventory.device')),
                ('parent_device', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='child_relationships', to='inventory.device')),
            ],
            options={
                'verbose_name': 'Device Relationship',
                'verbose_name_plural': 'Device Relationships',
                'ordering': ['id'],
            },
        ),
    ]
