"""
Service layer abstraction.

Services encapsulate the business logic behind the API handlers.  The
card store keeps its data in memory; swapping it for persistent
storage would not change the handlers.
"""
