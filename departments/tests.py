from io import StringIO
from unittest import skipUnless

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from .catalog import COMMON_DEPARTMENTS
from .models import Department
from .services import DepartmentSeeder


class InMemoryDepartmentRepository:
    """Department store kept in a list"""

    def __init__(self, departments=None):
        self.departments = list(departments or [])

    def exists_by_code(self, code):
        return any(d.code == code for d in self.departments)

    def find_by_name(self, name):
        return next((d for d in self.departments if d.name == name), None)

    def save(self, department):
        self.departments.append(department)
        return department


class BrokenDepartmentRepository(InMemoryDepartmentRepository):
    """Fails on the nth save"""

    def __init__(self, fail_on=1):
        super().__init__()
        self.fail_on = fail_on

    def save(self, department):
        if len(self.departments) + 1 == self.fail_on:
            raise ConnectionError("database unavailable")
        return super().save(department)


class DepartmentSeederTest(TestCase):
    """Test cases for seeding the common departments"""

    def setUp(self):
        # post_migrate seeding may already have filled the table
        Department.objects.all().delete()

    def test_seed_creates_all_common_departments(self):
        result = DepartmentSeeder().seed_all()

        self.assertTrue(result.ok)
        self.assertEqual(result.created, len(COMMON_DEPARTMENTS))
        self.assertEqual(result.skipped, 0)
        self.assertEqual(
            list(Department.objects.order_by('id').values_list('code', flat=True)),
            [template.code for template in COMMON_DEPARTMENTS]
        )
        self.assertFalse(Department.objects.filter(is_active=False).exists())

        finance = Department.objects.get(code="FIN")
        self.assertEqual(finance.name, "Finance")
        self.assertEqual(finance.description, "Manages financial operations, accounting, and budgeting")

    def test_seed_is_idempotent(self):
        DepartmentSeeder().seed_all()
        second = DepartmentSeeder().seed_all()

        self.assertEqual(second.created, 0)
        self.assertEqual(second.skipped, len(COMMON_DEPARTMENTS))
        self.assertEqual(Department.objects.count(), len(COMMON_DEPARTMENTS))

    def test_skips_template_when_code_exists(self):
        Department.objects.create(name="Tech Services", code="IT")

        result = DepartmentSeeder().seed_all()

        self.assertEqual(result.created, len(COMMON_DEPARTMENTS) - 1)
        self.assertEqual(result.skipped, 1)
        self.assertFalse(Department.objects.filter(name="Information Technology").exists())

    def test_skips_template_when_name_exists(self):
        Department.objects.create(name="Finance", code="MONEY")

        result = DepartmentSeeder().seed_all()

        self.assertEqual(result.skipped, 1)
        self.assertFalse(Department.objects.filter(code="FIN").exists())

    def test_existing_department_is_not_updated(self):
        Department.objects.create(
            name="Legal", code="LEGAL", description="Contracts only", is_active=False
        )

        DepartmentSeeder().seed_all()

        legal = Department.objects.get(code="LEGAL")
        self.assertEqual(legal.description, "Contracts only")
        self.assertFalse(legal.is_active)

    def test_seeds_through_injected_repository_in_order(self):
        repository = InMemoryDepartmentRepository()

        result = DepartmentSeeder(repository=repository).seed_all()

        self.assertEqual(result.created, len(COMMON_DEPARTMENTS))
        self.assertEqual(
            [d.name for d in repository.departments],
            [template.department_name for template in COMMON_DEPARTMENTS]
        )
        self.assertTrue(all(d.is_active for d in repository.departments))
        self.assertEqual(Department.objects.count(), 0)

    def test_store_failure_is_reported_not_raised(self):
        repository = BrokenDepartmentRepository(fail_on=3)

        with self.assertLogs('departments.services', level='ERROR') as logs:
            result = DepartmentSeeder(repository=repository).seed_all()

        self.assertFalse(result.ok)
        self.assertEqual(result.error, "database unavailable")
        self.assertEqual(result.created, 2)
        self.assertIn("Error initializing departments", logs.output[0])

    def test_management_command(self):
        out = StringIO()
        call_command('seed_departments', stdout=out)
        self.assertIn(f"Created {len(COMMON_DEPARTMENTS)} department(s)", out.getvalue())

        out = StringIO()
        call_command('seed_departments', stdout=out)
        self.assertIn("already exist", out.getvalue())


class DepartmentStartupSeedTest(TestCase):

    @skipUnless(settings.SEED_DEPARTMENTS_ON_MIGRATE, "seeding after migrate is disabled")
    def test_common_departments_exist_after_migrate(self):
        for template in COMMON_DEPARTMENTS:
            self.assertTrue(
                Department.objects.filter(code=template.code).exists()
                or Department.objects.filter(name=template.department_name).exists()
            )


class DepartmentAPITest(APITestCase):
    """Test cases for the departments endpoints"""

    def setUp(self):
        Department.objects.all().delete()
        User = get_user_model()
        self.admin = User.objects.create_user(username="admin", password="s3cret-pass", is_staff=True)
        self.user = User.objects.create_user(username="clerk", password="s3cret-pass")
        self.kitchen = Department.objects.create(name="Kitchen", code="KIT")
        self.spa = Department.objects.create(name="Spa", code="SPA", is_active=False)

    def test_requires_authentication(self):
        response = self.client.get(reverse('department-list'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_regular_user_sees_only_active_departments(self):
        self.client.force_authenticate(self.user)
        response = self.client.get(reverse('department-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([d['code'] for d in response.data], ["KIT"])

    def test_staff_sees_all_departments(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse('department-list'))
        self.assertEqual([d['name'] for d in response.data], ["Kitchen", "Spa"])

    def test_search_departments(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse('department-list'), {'search': 'spa'})
        self.assertEqual([d['code'] for d in response.data], ["SPA"])

    def test_staff_creates_department(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse('department-list'),
            {'name': 'Security', 'code': 'SEC', 'description': 'Guards the premises'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['is_active'])
        self.assertTrue(Department.objects.filter(code="SEC").exists())

    def test_regular_user_cannot_create_department(self):
        self.client.force_authenticate(self.user)
        response = self.client.post(
            reverse('department-list'), {'name': 'Security', 'code': 'SEC'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_duplicate_name_or_code_rejected(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse('department-list'), {'name': 'Kitchen', 'code': 'NEW'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data)

        response = self.client.post(
            reverse('department-list'), {'name': 'Galley', 'code': 'KIT'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('code', response.data)

    def test_blank_name_rejected(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse('department-list'), {'name': '   ', 'code': 'BLANK'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_staff_updates_and_deletes_department(self):
        self.client.force_authenticate(self.admin)
        url = reverse('department-detail', args=[self.kitchen.pk])

        response = self.client.patch(url, {'description': 'Hot food'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.kitchen.refresh_from_db()
        self.assertEqual(self.kitchen.description, 'Hot food')

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Department.objects.filter(pk=self.kitchen.pk).exists())

    def test_seed_endpoint(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse('department-seed'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['created'], len(COMMON_DEPARTMENTS))
        self.assertTrue(response.data['ok'])

        self.client.force_authenticate(self.user)
        response = self.client.post(reverse('department-seed'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
