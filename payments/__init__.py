# payments/__init__.py
"""
Payments Service

Microservice that processes point-of-sale payments through a pluggable,
startup-selected payment gateway and returns a bill.
"""

__version__ = "1.0.0"
