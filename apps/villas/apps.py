"""
apps.villas.apps
"""
from django.apps import AppConfig


class VillasConfig(AppConfig):
    name = "apps.villas"
    label = "villas"
    verbose_name = "Villas"
