"""
Run the development server on SERVER_PORT (default 2022).
"""

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Run the inventory server (UI and RPC endpoint) on SERVER_PORT'

    def add_arguments(self, parser):
        parser.add_argument(
            '--host',
            default='0.0.0.0',
            help='Interface to bind (default: 0.0.0.0)',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to listen on (default: SERVER_PORT setting)',
        )

    def handle(self, *args, **options):
        port = options['port'] or settings.SERVER_PORT
        self.stdout.write(f"Home Lab Inventory RPC server listening at port: {port}")
        call_command('runserver', f"{options['host']}:{port}", use_reloader=False)
