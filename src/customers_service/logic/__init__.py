"""
Business Logic Layer Module.

Sits between the Lambda handler and the data access layer. The only
operation is the fixed customers listing in ``list_customers``.
"""
