"""
Couche infrastructure (adapters).

Implementations concretes des ports du domaine.
"""
