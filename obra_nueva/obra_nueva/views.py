# obra_nueva/views.py
from pathlib import Path

from django.conf import settings
from django.http import FileResponse, Http404


def serve_document_file(request, path):
    """Serve an uploaded document from MEDIA_ROOT (download links in Slack point here)."""
    media_root = Path(settings.MEDIA_ROOT).resolve()
    file_path = (media_root / path).resolve()

    if media_root not in file_path.parents or not file_path.is_file():
        raise Http404("File not found")
    return FileResponse(open(file_path, 'rb'), as_attachment=False)
