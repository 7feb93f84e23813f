"""MetalFlow attendance package.

Feature modules (employees, attendance, reports, ...) with a thin Flask
controller layer on top of service/repository layers. The classification
and statistics functions are pure and usable without Flask or MySQL.
"""
