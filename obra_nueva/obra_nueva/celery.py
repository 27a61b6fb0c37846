import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'obra_nueva.settings')

app = Celery('obra_nueva')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
