"""
Service layer abstraction.

Services encapsulate all access to the document store so that API
handlers never touch the driver directly.
"""
