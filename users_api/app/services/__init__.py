"""
Service layer abstraction.

Services encapsulate business logic and raise domain exceptions.  They
know nothing about HTTP; routers translate their errors into status
codes.
"""
