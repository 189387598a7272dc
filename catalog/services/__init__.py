"""
Services Package

Cross-cutting services used by the application:
- rate_limiter.py: Rate limiting with slowapi
"""
