from django.contrib import admin
from django.urls import include, path, re_path

from .views import serve_document_file

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('construction.urls')),
    re_path(r'^media/(?P<path>.+)$', serve_document_file, name='media_file'),
]
