# payments/routers/__init__.py
"""
Routers/endpoints of the Payments Service
"""
