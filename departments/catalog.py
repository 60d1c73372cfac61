"""
Common departments used to bootstrap a fresh installation.

The order of COMMON_DEPARTMENTS is the order in which they are seeded.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CommonDepartment:
    department_name: str
    code: str
    description: str


COMMON_DEPARTMENTS = (
    CommonDepartment("Information Technology", "IT", "Manages technology infrastructure and software development"),
    CommonDepartment("Human Resources", "HR", "Manages employee relations, recruitment, and benefits"),
    CommonDepartment("Finance", "FIN", "Manages financial operations, accounting, and budgeting"),
    CommonDepartment("Sales", "SALES", "Manages customer relationships and revenue generation"),
    CommonDepartment("Marketing", "MKT", "Manages brand promotion and market research"),
    CommonDepartment("Operations", "OPS", "Manages day-to-day business operations"),
    CommonDepartment("Customer Support", "CS", "Handles customer inquiries and support"),
    CommonDepartment("Legal", "LEGAL", "Manages legal compliance and contracts"),
    CommonDepartment("Research and Development", "R&D", "Manages innovation and product development"),
    CommonDepartment("Quality Assurance", "QA", "Ensures product and service quality"),
    CommonDepartment("Administration", "ADMIN", "Manages general administrative tasks"),
    CommonDepartment("Procurement", "PROC", "Manages purchasing and vendor relationships"),
    CommonDepartment("Logistics", "LOG", "Manages supply chain and distribution"),
    CommonDepartment("Training and Development", "T&D", "Manages employee training programs"),
    CommonDepartment("Facilities Management", "FM", "Manages building and infrastructure"),
)
