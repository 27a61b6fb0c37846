from rest_framework import serializers

from .models import Construction, Service
from .progress import ServiceSnapshot, progress_palette, project


# ====== PRIVILEGED UPDATES ======
class DistributorAssignmentSerializer(serializers.Serializer):
    construction_id = serializers.IntegerField(
        min_value=1, error_messages={'required': 'construction_id es requerido', 'null': 'construction_id es requerido'}
    )
    # Must be sent; null clears the distributor
    distributor_id = serializers.IntegerField(
        allow_null=True, error_messages={'required': 'distributor_id es requerido'}
    )


class ServiceTypeAssignmentSerializer(serializers.Serializer):
    service_id = serializers.IntegerField(
        min_value=1, error_messages={'required': 'service_id es requerido', 'null': 'service_id es requerido'}
    )
    type_id = serializers.IntegerField(allow_null=True, error_messages={'required': 'type_id es requerido'})


class ConstructionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Construction
        fields = '__all__'


class ServiceSerializer(serializers.ModelSerializer):
    status_id = serializers.IntegerField(read_only=True)
    previous_status_id = serializers.IntegerField(read_only=True)
    construction_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Service
        fields = [
            'id', 'construction_id', 'type_id', 'status_id', 'previous_status_id',
            'comment', 'created_at', 'updated_at',
        ]


# ====== HUBSPOT ======
class DealCreateSerializer(serializers.Serializer):
    constructionData = serializers.DictField(error_messages={'required': 'Faltan datos de construcción'})
    serviceIds = serializers.DictField(required=False, allow_null=True)
    # Local construction that receives the created deal id
    constructionId = serializers.IntegerField(required=False, allow_null=True, min_value=1)

    def validate_constructionData(self, value):
        if not str(value.get('name') or '').strip():
            raise serializers.ValidationError('Faltan datos de construcción')
        return value


class DealFieldUpdateSerializer(serializers.Serializer):
    dealId = serializers.CharField()
    propertyName = serializers.CharField()
    propertyValue = serializers.CharField(trim_whitespace=False)


# ====== USERS ======
class CreateUserSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)
    username = serializers.CharField()
    companyId = serializers.IntegerField()


# ====== DOCUMENTS ======
class DocumentUploadSerializer(serializers.Serializer):
    file = serializers.FileField(required=False)
    document_type_id = serializers.IntegerField(min_value=1)
    document_status_id = serializers.IntegerField(required=False, allow_null=True)
    content_text = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    is_incidence_resolution = serializers.BooleanField(required=False, default=False)
    user_name = serializers.CharField(required=False, allow_blank=True, default='')
    user_email = serializers.CharField(required=False, allow_blank=True, default='')

    def validate(self, attrs):
        if not attrs.get('file') and not (attrs.get('content_text') or '').strip():
            raise serializers.ValidationError('Se requiere un archivo o un texto')
        return attrs


# ====== PROGRESS ======
class StatusDefinitionSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    is_final = serializers.BooleanField()
    is_incidence = serializers.BooleanField()
    service_type_id = serializers.IntegerField(allow_null=True)
    order = serializers.IntegerField()


class ServiceProgressSerializer(serializers.Serializer):
    """
    Progress of one service over its status catalog, ready for the tracker:
    one entry per step plus the fill percentage and bar palette.
    """
    service_id = serializers.IntegerField()
    status_id = serializers.IntegerField(allow_null=True)
    tracker_status_id = serializers.IntegerField(allow_null=True)
    off_track = serializers.BooleanField()
    is_incidence = serializers.BooleanField()
    fill_percent = serializers.FloatField()
    palette = serializers.DictField()
    steps = serializers.ListField()

    @classmethod
    def from_service(cls, service, catalog, is_incidence=None):
        live_status = service.status
        if is_incidence is None:
            is_incidence = bool(live_status and live_status.is_incidence)

        view = project(ServiceSnapshot.from_model(service), catalog, is_incidence)
        palette = progress_palette(view, live_status.name if live_status else None, is_incidence)

        names = {definition.id: definition.name for definition in catalog}
        steps = [
            {
                'status_id': step.status_id,
                'name': names.get(step.status_id, ''),
                'state': step.state,
                'is_active': step.is_active,
                'is_passed': step.is_passed,
            }
            for step in view.step_states
        ]

        return cls({
            'service_id': service.id,
            'status_id': service.status_id,
            'tracker_status_id': view.tracker_status_id,
            'off_track': view.tracker_status_id != service.status_id,
            'is_incidence': is_incidence,
            'fill_percent': round(view.fill_percent, 2),
            'palette': {'show_bar': palette.show_bar, 'color': palette.color},
            'steps': steps,
        })
