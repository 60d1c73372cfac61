from django.db import models


class Department(models.Model):
    """Department model for organizing hotel staff"""
    name = models.CharField(max_length=100, unique=True)
    code = models.CharField(max_length=20, unique=True, null=True, blank=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = 'Department'
        verbose_name_plural = 'Departments'
        indexes = [
            models.Index(fields=['name'], name='departments_name_idx'),
            models.Index(fields=['code'], name='departments_code_idx'),
        ]

    def __str__(self):
        return self.name
