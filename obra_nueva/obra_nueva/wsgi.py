import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'obra_nueva.settings')

application = get_wsgi_application()
