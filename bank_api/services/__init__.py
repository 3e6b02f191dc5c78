"""
High-level use cases for the bank profile API.

Service modules orchestrate repositories to implement business rules
(create a customer, protect the reserved template user, merge updates).
Routers call these services instead of touching the database directly.
"""
