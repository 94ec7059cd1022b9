"""
Service layer.

``sales_service`` implements the read-only queries over a record
store and ``response_builder`` wraps their results in response
envelopes.  Neither module knows about HTTP.
"""
