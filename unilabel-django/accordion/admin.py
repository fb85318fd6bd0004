from django.contrib import admin

from accordion.models import Accordion, AccordionSegment


class AccordionSegmentInline(admin.StackedInline):
    model = AccordionSegment
    extra = 0


@admin.register(Accordion)
class AccordionAdmin(admin.ModelAdmin):
    list_display = ['unilabel', 'showintro']
    inlines = [AccordionSegmentInline]
