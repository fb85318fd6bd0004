from django.contrib import admin

from unilabel.models import Unilabel


@admin.register(Unilabel)
class UnilabelAdmin(admin.ModelAdmin):
    list_display = ['name', 'unilabeltype', 'timemodified']
    list_filter = ['unilabeltype']
    search_fields = ['name']
