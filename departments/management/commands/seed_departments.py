"""
Management command to create the common departments.

Usage:
    python manage.py seed_departments

Departments that already exist (same code or same name) are left untouched,
so the command can be run any number of times.
"""
from django.core.management.base import BaseCommand

from departments.services import DepartmentSeeder


class Command(BaseCommand):
    help = 'Create the common departments that are missing'

    def handle(self, *args, **options):
        result = DepartmentSeeder().seed_all()

        if not result.ok:
            self.stderr.write(
                self.style.ERROR(f'Department seeding failed: {result.error}')
            )
            return

        if result.created == 0:
            self.stdout.write(
                self.style.SUCCESS(f'All {result.skipped} common departments already exist.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(
                f'Created {result.created} department(s), '
                f'{result.skipped} already present.'
            )
        )
