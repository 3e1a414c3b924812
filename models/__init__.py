# -*- coding: utf-8 -*-
"""
BetterNames Models Package

Data models shared by the ingestion pipeline and the controllers.
"""

from models.category_config import CategoryConfiguration
from models.document import RawDocument, DecodedText
from models.load_report import LoadReport, SourceLoadResult
from models.settings_model import SettingsModel

__all__ = [
    'CategoryConfiguration', 'RawDocument', 'DecodedText',
    'LoadReport', 'SourceLoadResult', 'SettingsModel',
]
