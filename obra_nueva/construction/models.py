from django.db import models
from django.utils import timezone

from .constants import DOCUMENTS_BUCKET
from .utils import generate_document_filename


class ServiceStatus(models.Model):
    name = models.CharField(max_length=100)
    is_final = models.BooleanField(default=False)
    is_incidence = models.BooleanField(default=False)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'services_status'
        verbose_name = '⚙️ Service Status'
        verbose_name_plural = '⚙️ Service Statuses'


class ServiceTypeStatus(models.Model):
    # NULL service_type_id: the step is shared by every service type
    service_type_id = models.IntegerField(blank=True, null=True, db_index=True)
    status = models.ForeignKey(ServiceStatus, on_delete=models.CASCADE, related_name='type_configs')
    orden = models.IntegerField(default=0)

    def __str__(self):
        scope = self.service_type_id if self.service_type_id is not None else 'all'
        return f"{self.status.name} (type {scope}, #{self.orden})"

    class Meta:
        db_table = 'service_type_status'
        ordering = ['orden']
        verbose_name = '⚙️ Service Type Status'
        verbose_name_plural = '⚙️ Service Type Statuses'


class Construction(models.Model):
    name = models.CharField(max_length=255)
    address = models.TextField(blank=True, default='')
    postal_code = models.CharField(max_length=20, blank=True, default='')
    municipality = models.CharField(max_length=255, blank=True, default='')
    company_id = models.IntegerField(blank=True, null=True)
    distributor_id = models.IntegerField(blank=True, null=True)
    hubspot_deal_id = models.CharField(max_length=50, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Obra #{self.id} {self.name}"

    class Meta:
        db_table = 'construction'
        verbose_name = 'Construction'
        verbose_name_plural = 'Constructions'


class Service(models.Model):
    construction = models.ForeignKey(Construction, on_delete=models.CASCADE, related_name='services')
    type_id = models.IntegerField(blank=True, null=True)
    status = models.ForeignKey(
        ServiceStatus, on_delete=models.SET_NULL, blank=True, null=True, related_name='+'
    )
    # Last status that belonged to the service's normal path, kept for the progress tracker
    previous_status = models.ForeignKey(
        ServiceStatus, on_delete=models.SET_NULL, blank=True, null=True, related_name='+'
    )
    comment = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"Service #{self.id} (type {self.type_id}) of {self.construction_id}"

    class Meta:
        db_table = 'services'
        verbose_name = 'Service'
        verbose_name_plural = 'Services'


class DocumentationType(models.Model):
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100, blank=True, null=True)
    requires_file = models.BooleanField(default=True)
    # HubSpot deal property that receives the document link / text
    hubspot_document = models.CharField(max_length=100, blank=True, null=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'documentation_type'
        verbose_name = '⚙️ Documentation Type'
        verbose_name_plural = '⚙️ Documentation Types'


def document_upload_path(instance, filename):
    return f"{DOCUMENTS_BUCKET}/{instance.service_id}/" + generate_document_filename(
        instance.service_id, instance.document_type_id, filename
    )


class Document(models.Model):
    service = models.ForeignKey(Service, on_delete=models.CASCADE, related_name='documents')
    document_type_id = models.IntegerField()
    document_status_id = models.IntegerField(blank=True, null=True)
    file = models.FileField(upload_to=document_upload_path, blank=True, null=True, max_length=500)
    link = models.TextField(blank=True, null=True)
    content_text = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Document #{self.id} (type {self.document_type_id}) for service {self.service_id}"

    class Meta:
        db_table = 'documents'
        verbose_name = 'Document'
        verbose_name_plural = 'Documents'


class UserProfile(models.Model):
    # Same id as the identity created in Supabase Auth
    id = models.CharField(max_length=64, primary_key=True)
    username = models.CharField(max_length=255)
    company_id = models.IntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.username} (company {self.company_id})"

    class Meta:
        db_table = 'users'
        verbose_name = 'User profile'
        verbose_name_plural = 'User profiles'
