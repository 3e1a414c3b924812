# -*- coding: utf-8 -*-
"""
BetterNames Controllers Package

Controllers coordinate the settings model, the ingestion pipeline and the
live translation store.
"""

from controllers.locale_controller import LocaleController

__all__ = [
    'LocaleController',
]
