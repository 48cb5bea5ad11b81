"""
Services Package

Cross-cutting services used by the application:
- rate_limiter: slowapi limiter and its 429 handler
"""
