import logging
from dataclasses import dataclass
from typing import Optional

from .catalog import COMMON_DEPARTMENTS
from .models import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    """Outcome of a seeding pass"""
    created: int = 0
    skipped: int = 0
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


class DepartmentSeeder:
    """
    Creates the common departments that are missing from the store.

    A template is skipped when a department with the same code or the same
    name already exists. Existing rows are never updated.
    """

    def __init__(self, repository=None, templates=COMMON_DEPARTMENTS):
        self.repository = repository or DepartmentRepository()
        self.templates = templates

    def seed_all(self):
        """
        Run one seeding pass. Failures are logged and reported in the
        result, never raised, so callers at startup can ignore them.
        """
        result = SeedResult()
        try:
            logger.info("Initializing common departments...")
            for template in self.templates:
                if self._exists(template):
                    result.skipped += 1
                    continue

                department = Department(
                    name=template.department_name,
                    code=template.code,
                    description=template.description,
                    is_active=True,
                )
                self.repository.save(department)
                result.created += 1
                logger.info("Created department: %s (%s)", template.department_name, template.code)

            logger.info(
                "Department seeding finished: %s created, %s already present",
                result.created, result.skipped
            )
        except Exception as e:
            logger.exception("Error initializing departments: %s", e)
            result.error = str(e)
        return result

    def _exists(self, template):
        if self.repository.exists_by_code(template.code):
            return True
        return self.repository.find_by_name(template.department_name) is not None
