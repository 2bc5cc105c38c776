"""HTTP adapter for the archbudget calculators."""

from archbudget.api.app import create_app

__all__ = ["create_app"]
