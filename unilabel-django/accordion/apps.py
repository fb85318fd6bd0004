from django.apps import AppConfig


class AccordionConfig(AppConfig):
    name = 'accordion'
    verbose_name = 'Accordion labels'
