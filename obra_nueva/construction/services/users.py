# construction/services/users.py
"""User provisioning: auth identity first, then the profile row."""

import logging

from django.db import transaction

from ..exceptions import ProfileError
from ..models import UserProfile
from ..utils import mask_email
from .saga import CompensatedStep, run_compensated

logger = logging.getLogger(__name__)


def create_user_with_profile(auth_admin, email: str, password: str, username: str, company_id: int):
    """
    Create the Supabase identity and the `users` row keyed by its id.

    Returns (identity, profile). Raises IdentityError when the identity
    cannot be created, ProfileError when the row cannot be inserted (the
    identity is deleted again in that case).
    """
    def _insert_profile(identity):
        try:
            with transaction.atomic():
                return UserProfile.objects.create(
                    id=str(identity['id']),
                    username=username,
                    company_id=company_id,
                )
        except Exception as e:
            logger.error(f"[CreateUser] ❌ Profile insert failed for {mask_email(email)}: {e}")
            raise ProfileError("Error creating user record", details=str(e)) from e

    identity_step = CompensatedStep(
        name='auth identity',
        action=lambda: auth_admin.create_user(email, password),
        compensate=lambda identity: auth_admin.delete_user(identity['id']),
    )

    identity, profile = run_compensated(identity_step, _insert_profile)
    logger.info(f"[CreateUser] ✅ User {identity['id']} ({mask_email(email)}) created for company {company_id}")
    return identity, profile
