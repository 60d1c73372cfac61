import logging

from django.conf import settings

from .services import DepartmentSeeder

logger = logging.getLogger(__name__)


def seed_common_departments(sender, **kwargs):
    """
    post_migrate receiver: make sure the common departments exist once the
    schema is in place. The seeding result is logged and otherwise ignored.
    """
    if not getattr(settings, 'SEED_DEPARTMENTS_ON_MIGRATE', True):
        return

    result = DepartmentSeeder().seed_all()
    if not result.ok:
        logger.warning(f"Department seeding did not complete: {result.error}")
