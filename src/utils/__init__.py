"""
Utility modules for Sentiment Pulse.

Cross-cutting concerns:
- Coercion: Permissive parsing of raw string fields into typed values
"""
