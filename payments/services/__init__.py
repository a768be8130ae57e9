# payments/services/__init__.py
"""
Business services of the Payments Service
"""
