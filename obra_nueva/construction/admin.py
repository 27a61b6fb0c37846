# construction/admin.py
from django.contrib import admin

from .models import (
    ServiceStatus,
    ServiceTypeStatus,

    Construction,
    Service,

    DocumentationType,
    Document,

    UserProfile,
)


# ====== STATUS CATALOG ======
@admin.register(ServiceStatus)
class ServiceStatusAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'is_final', 'is_incidence')
    list_filter = ('is_final', 'is_incidence')
    search_fields = ('name',)


@admin.register(ServiceTypeStatus)
class ServiceTypeStatusAdmin(admin.ModelAdmin):
    list_display = ('id', 'service_type_id', 'status', 'orden')
    list_filter = ('service_type_id',)
    ordering = ('service_type_id', 'orden')


# ====== CONSTRUCTIONS ======
class ServiceInline(admin.TabularInline):
    model = Service
    extra = 0
    fk_name = 'construction'
    readonly_fields = ('previous_status', 'created_at', 'updated_at')


@admin.register(Construction)
class ConstructionAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'municipality', 'company_id', 'distributor_id', 'hubspot_deal_id', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('name', 'address', 'municipality', 'hubspot_deal_id')
    inlines = [ServiceInline]


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ('id', 'construction', 'type_id', 'status', 'previous_status', 'updated_at')
    list_filter = ('type_id', 'status')
    search_fields = ('construction__name', 'comment')
    readonly_fields = ('previous_status', 'created_at')


# ====== DOCUMENTS ======
@admin.register(DocumentationType)
class DocumentationTypeAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'category', 'requires_file', 'hubspot_document')
    list_filter = ('category', 'requires_file')
    search_fields = ('name', 'hubspot_document')


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ('id', 'service', 'document_type_id', 'document_status_id', 'file', 'created_at')
    list_filter = ('document_type_id', 'created_at')
    search_fields = ('link', 'content_text')
    readonly_fields = ('created_at', 'updated_at')


# ====== USERS ======
@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('id', 'username', 'company_id', 'created_at')
    list_filter = ('company_id',)
    search_fields = ('id', 'username')
