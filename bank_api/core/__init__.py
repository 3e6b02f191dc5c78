"""
Core utilities shared across the bank profile API.

Hosts configuration (env vars, database URL, log level) and the logging
bootstrap. Services and routers depend on these primitives instead of
reading os.environ themselves.
"""
