import tempfile

from .settings import *  # noqa: F401,F403

SECRET_KEY = 'test-secret-key'
DEBUG = False
ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

MEDIA_ROOT = tempfile.mkdtemp(prefix='obra_nueva_media_')
BASE_URL = 'http://testserver'

HUBSPOT_ACCESS_TOKEN = 'hubspot-test-token'
HUBSPOT_OWNER_ID = '158118434'
HUBSPOT_API_BASE = 'https://api.hubapi.test'

SLACK_WEBHOOK_URL = 'https://hooks.slack.test/services/T000/B000/XXX'

SUPABASE_URL = 'https://project.supabase.test'
SUPABASE_SERVICE_ROLE_KEY = 'service-role-test-key'

INTERNAL_API_TOKEN = 'testtoken'

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
