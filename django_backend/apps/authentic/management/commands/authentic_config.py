"""
Print the resolved authentication config of registered models as JSON.

    python -m django authentic_config
    python -m django authentic_config --model members.Member
"""

import json

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from ...registry import site
from ...serializers import AuthenticConfigSerializer


class Command(BaseCommand):
    help = 'Show the resolved authentication config of authenticable models'

    def add_arguments(self, parser):
        parser.add_argument(
            '--model',
            help='Limit output to one model, given as app_label.ModelName',
        )

    def handle(self, *args, **options):
        if options['model']:
            try:
                model = apps.get_model(options['model'])
            except (LookupError, ValueError) as exc:
                raise CommandError(str(exc))
            if not site.is_registered(model):
                raise CommandError(f'{model._meta.label} is not registered as authenticable')
            models = [model]
        else:
            models = site.registered_models()

        if not models:
            self.stdout.write(self.style.WARNING('No authenticable models registered.'))
            return

        data = {
            model._meta.label: AuthenticConfigSerializer(site.get_config(model)).data
            for model in models
        }
        self.stdout.write(json.dumps(data, indent=2, sort_keys=True))
