"""Infrastructure layer — storage ports, stores, and the database.

The service layer reaches persisted state only through a StoragePort.
Stores never interpret business rules.
"""
