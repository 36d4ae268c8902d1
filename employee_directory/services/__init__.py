"""
Service layer package.

Each service module encapsulates one domain of business logic.
Services reach storage only through repositories; routes never access
the database directly.

Import services in route modules as needed::

    from employee_directory.services import employee_service
"""
