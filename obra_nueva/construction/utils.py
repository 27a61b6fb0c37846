import hmac
import os
import time


def generate_document_filename(service_id, document_type_id, original_name: str) -> str:
    """`{service}_{type}_{millis}.{ext}`, keeping the uploaded file's extension."""
    ext = os.path.splitext(original_name or '')[1].lstrip('.').lower()
    stem = f"{service_id}_{document_type_id}_{int(time.time() * 1000)}"
    return f"{stem}.{ext}" if ext else stem


def mask_email(email: str) -> str:
    if not email or '@' not in email:
        return ''
    name, domain = email.split('@', 1)
    return name[:4] + '***@' + domain


def check_bearer_token(request, expected: str) -> bool:
    header = request.headers.get('Authorization') or ''
    if not expected or not header.startswith('Bearer '):
        return False
    return hmac.compare_digest(header[len('Bearer '):], expected)


def parse_positive_int(value):
    """Return value as a positive int, or None when it is missing or not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_int(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None
