from django.apps import AppConfig
from django.db.models.signals import post_migrate


class DepartmentsConfig(AppConfig):
    name = 'departments'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from .signals import seed_common_departments

        post_migrate.connect(
            seed_common_departments,
            sender=self,
            dispatch_uid='departments.seed_common_departments',
        )
