from django.apps import AppConfig


class UnilabelConfig(AppConfig):
    name = 'unilabel'
    verbose_name = 'Labels'
