from django.contrib import admin
from .models import WaitlistEntry


@admin.register(WaitlistEntry)
class WaitlistEntryAdmin(admin.ModelAdmin):
    list_display = ['email', 'jurisdiction', 'created_at']
    list_filter = ['jurisdiction']
    search_fields = ['email']
