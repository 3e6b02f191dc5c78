"""
Persistence adapters.

``base.UserRepository`` is the port the services depend on;
``sql_repository.SQLUserRepository`` is the SQLAlchemy implementation.
"""
