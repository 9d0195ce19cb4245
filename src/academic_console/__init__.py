"""
academic-console: PyQt6 administrative console for academic program records.

Paginated, searchable CRUD screens (departments, Bloom's taxonomy, program
modes, PEOs, program outcomes, faculty seminar/training records) over a
REST API. Each screen is a ResourceManager parameterized by a declarative
ResourceSchema.
"""

__version__ = "0.1.0"
