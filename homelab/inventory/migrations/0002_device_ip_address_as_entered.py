# Home Lab Inventory - store IP addresses exactly as entered

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('inventory', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='device',
            name='ip_address',
            field=models.CharField(blank=True, help_text='IPv4 or IPv6 address', max_length=45, null=True, validators=[django.core.validators.validate_ipv46_address]),
        ),
    ]
