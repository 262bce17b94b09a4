from django.apps import AppConfig


class TaxAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tax'
    verbose_name = 'Tax Threshold'
