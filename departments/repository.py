from .models import Department


class DepartmentRepository:
    """
    Store used by the department seeder.

    Any object exposing exists_by_code, find_by_name and save can stand in
    for this class.
    """

    def exists_by_code(self, code):
        return Department.objects.filter(code=code).exists()

    def find_by_name(self, name):
        return Department.objects.filter(name=name).first()

    def save(self, department):
        department.save()
        return department
