# Service type id → HubSpot deal property holding that service's id
SERVICE_TYPE_DEAL_FIELDS = {
    1: 'construction_electric_service_id',
    2: 'construction_gas_service_id',
    3: 'construction_water_service_id',
    4: 'construction_telecom_service_id',
    5: 'definitive_electric_service_id',
    6: 'definitive_gas_service_id',
    7: 'definitive_water_service_id',
}

# constructionData key → HubSpot deal property, with the value sent when the key is missing
CONSTRUCTION_DEAL_FIELDS = (
    ('address', 'direccion_obra', ''),
    ('postal_code', 'codigo_postal_obra', ''),
    ('municipality', 'municipio_obra', ''),
    ('company_name', 'razon_social_peticionario', ''),
    ('company_cif', 'cif_peticionario', ''),
    ('fiscal_address', 'domicilio_fiscal_peticionario', ''),
    ('housing_count', 'numero_viviendas', 0),
    ('acometida', 'acometida', ''),
)

# Live status names with a fixed treatment on the progress bar
STATUS_SIN_GESTIONAR = 'Sin Gestionar'
STATUS_EN_REVISION = 'En Revisión'
STATUS_ACTIVADO = 'Activado'
STATUS_CANCELADO = 'Cancelado'

PROGRESS_COLORS = {
    'default': '#FEB55D',
    'unmanaged': '#d0d3dd',
    'activated': '#78EC95',
    'incidence': '#F97066',
}

DOCUMENTS_BUCKET = 'documents'

UPLOAD_STEP_STORE = 'store_file'
UPLOAD_STEP_RECORD = 'insert_record'
UPLOAD_STEP_NOTIFY = 'notify_chat'

UPLOAD_STEP_MESSAGES = {
    UPLOAD_STEP_STORE: 'No se pudo subir el archivo',
    UPLOAD_STEP_RECORD: 'No se pudo registrar el documento',
    UPLOAD_STEP_NOTIFY: 'No se pudo notificar la subida',
}
