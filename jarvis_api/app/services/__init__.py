"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  API
handlers only talk to services, so the in-memory storage used here can
be swapped for a database without changing the routes.
"""
