"""Domain layer for secure-admin.

Pure model code: no imports from the application, infrastructure or api
layers. Everything here is deterministic and free of I/O.
"""
