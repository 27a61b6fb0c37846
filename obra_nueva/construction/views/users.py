# construction/views/users.py
import logging

from rest_framework import serializers

from ..clients import SupabaseAuthAdmin
from ..exceptions import IdentityError, ProfileError
from ..serializers import CreateUserSerializer
from ..services import create_user_with_profile
from ..utils import mask_email
from .base import ActionView, envelope, error_envelope

logger = logging.getLogger(__name__)


class CreateUserView(ActionView):
    """
    Create a login for a company user: Supabase identity + `users` row.

    Identity failure → 400 with the provider's message.
    Profile failure → 500; the identity is deleted again before answering.
    """

    def post(self, request, format=None):
        ser = CreateUserSerializer(data=request.data)
        if not ser.is_valid():
            missing = [field for field, errors in ser.errors.items() if any(e.code == 'required' for e in errors)]
            if missing:
                return error_envelope('Missing required fields', 400, details=', '.join(missing))
            raise serializers.ValidationError(ser.errors)
        data = ser.validated_data

        logger.info(f"[CreateUser] 👤 Creating {mask_email(data['email'])} for company {data['companyId']}")
        try:
            identity, profile = create_user_with_profile(
                SupabaseAuthAdmin(self.config),
                email=data['email'],
                password=data['password'],
                username=data['username'],
                company_id=data['companyId'],
            )
        except IdentityError as e:
            logger.warning(f"[CreateUser] ⚠️ Auth rejected {mask_email(data['email'])}: {e.details}")
            return error_envelope(e.message, 400, details=e.details)
        except ProfileError as e:
            return error_envelope(e.message, 500, details=e.details)

        return envelope(
            message='Usuario creado exitosamente',
            user={
                'id': profile.id,
                'email': identity.get('email') or data['email'],
                'username': profile.username,
                'company_id': profile.company_id,
            },
        )
