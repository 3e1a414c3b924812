# -*- coding: utf-8 -*-
"""
BetterNames Translation Ingestor

Turns the files of one translation directory into a TranslationStore:
- reads each listed source and decodes it (core.byte_codec)
- tokenizes lines (core.row_tokenizer)
- resolves header columns per policy and synthesizes keys
- gates files and columns on the CategoryConfiguration
- records one diagnostic per failed source and keeps going
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import betternames_config as config
from betternames_enums import HeaderPolicy
from betternames_exceptions import (
    EmptySourceError, HeaderResolutionError, SourceError,
    SourceFileMissingError, SourceReadError,
)
from betternames_logger import get_logger
from core.byte_codec import decode_document
from core.row_tokenizer import split_line
from core.source_table import SOURCE_FILES, SourceSpec, category_flag, key_prefix_for
from core.translation_store import TranslationStore
from locales import tr
from models.category_config import CategoryConfiguration
from models.document import DecodedText, RawDocument
from models.load_report import LoadReport, SourceLoadResult

logger = get_logger("core.ingestor")

MIN_LINES = 2


# =============================================================================
# FILE ACCESS
# =============================================================================

def read_document(file_path) -> RawDocument:
    """
    Read a whole file in one pass.

    Python opens files with shared read/write access on Windows, so a
    spreadsheet holding the file open does not block the read.

    Raises:
        SourceFileMissingError: file does not exist
        SourceReadError: any other I/O failure
    """
    path = Path(file_path)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        raise SourceFileMissingError(
            tr("error_source_missing", name=path.name, path=path), file_path=str(path)
        )
    except OSError as e:
        raise SourceReadError(
            tr("error_source_read", name=path.name, path=path, error=e), file_path=str(path)
        ) from e
    return RawDocument(data=data, source_name=path.name)


def read_text(file_path) -> DecodedText:
    """Read and decode a file."""
    return decode_document(read_document(file_path))


def _strip_header_cell(cell: str) -> str:
    return cell.lstrip(config.BOM_CHAR).strip()


# =============================================================================
# HEADER POLICIES
# =============================================================================

def resolve_catalog_columns(headers: Sequence[str]) -> Tuple[int, int]:
    """
    Locate the key column and the translation column of a catalog header.

    Returns:
        (key_column, translation_column); -1 for a column that is missing.
    """
    key_column = -1
    translation_column = -1
    for i, raw in enumerate(headers):
        name = _strip_header_cell(raw)
        if key_column < 0 and name.lower() == config.KEY_COLUMN:
            key_column = i
        if translation_column < 0 and name.startswith(config.TRANSLATION_MARKER):
            translation_column = i
    return key_column, translation_column


def resolve_category_columns(headers: Sequence[str]) -> List[Tuple[int, str]]:
    """All (column index, category name) pairs of a named-category header."""
    marker = config.TRANSLATION_MARKER + config.CATEGORY_SEPARATOR
    columns = []
    for i, raw in enumerate(headers):
        name = _strip_header_cell(raw)
        if name.startswith(marker):
            columns.append((i, name[len(marker):]))
    return columns


def is_category_enabled(category_name: str, settings: CategoryConfiguration) -> bool:
    """
    Whether a category column may contribute entries.

    Categories missing from the category table are included so that files
    with extra columns keep working.
    """
    flag = category_flag(category_name)
    if flag is None:
        return True
    return settings.is_enabled(flag)


# =============================================================================
# INGESTOR
# =============================================================================

class TranslationIngestor:
    """
    Builds a translation mapping from a directory of source files.

    Args:
        settings: Read-only configuration snapshot
        sources: Ordered source list (defaults to SOURCE_FILES)
    """

    def __init__(self, settings: Optional[CategoryConfiguration] = None,
                 sources: Sequence[SourceSpec] = SOURCE_FILES):
        self.settings = settings or CategoryConfiguration()
        self.sources = tuple(sources)

    # -------------------------------------------------------------------------
    # Per-file parsing
    # -------------------------------------------------------------------------

    def _split_header(self, decoded: DecodedText, file_path) -> List[str]:
        if decoded.line_count < MIN_LINES:
            raise EmptySourceError(
                tr("error_too_few_lines", name=decoded.source_name, path=file_path),
                file_path=str(file_path),
            )
        return split_line(decoded.lines[0])

    def parse_catalog(self, decoded: DecodedText, file_path="") -> Dict[str, str]:
        """
        Parse a catalog-style file (key column + translation column).

        Rows missing either cell, or with either cell empty, are skipped.
        """
        headers = self._split_header(decoded, file_path)
        key_column, translation_column = resolve_catalog_columns(headers)

        if key_column < 0 or translation_column < 0:
            logger.warning(
                f"{decoded.source_name} header resolution failed: keyColumn={key_column}, "
                f"translationColumn={translation_column}, headers=[{', '.join(headers)}]"
            )
            raise HeaderResolutionError(
                tr("error_header_failed", name=decoded.source_name, path=file_path, headers=", ".join(headers)),
                file_path=str(file_path),
                headers=headers,
            )

        needed = max(key_column, translation_column)
        result = {}
        for line in decoded.lines[1:]:
            values = split_line(line)
            if len(values) <= needed:
                continue
            key = values[key_column]
            translation = values[translation_column]
            if key and translation:
                result[key] = translation
        return result

    def parse_named_category(self, decoded: DecodedText, source: SourceSpec, file_path="") -> Dict[str, str]:
        """
        Parse a bulk name list with one "你的翻译_<category>" column per category.

        Keys are prefix:row_index, or prefix[identifier] when the source has an
        identity column. Disabled categories and empty cells produce nothing.
        """
        headers = self._split_header(decoded, file_path)
        columns = resolve_category_columns(headers)

        if not columns:
            raise HeaderResolutionError(
                tr("error_header_failed", name=decoded.source_name, path=file_path, headers=", ".join(headers)),
                file_path=str(file_path),
                headers=headers,
            )

        active = []
        for col_index, category_name in columns:
            if not is_category_enabled(category_name, self.settings):
                logger.debug(f"{decoded.source_name}: category '{category_name}' disabled")
                continue
            if category_flag(category_name) is None:
                logger.info(f"{decoded.source_name}: unknown category '{category_name}', included")
            active.append((col_index, key_prefix_for(category_name, source.key_prefixes)))

        identity_column = source.identity_column
        identity_prefix = source.key_prefixes[0] if source.key_prefixes else config.BRAND_KEY_PREFIX

        result = {}
        for line_index in range(1, decoded.line_count):
            values = split_line(decoded.lines[line_index])
            row_index = line_index - 1

            for col_index, prefix in active:
                if col_index >= len(values):
                    continue
                translation = values[col_index]
                if not translation:
                    continue

                if source.uses_identity_keys:
                    if identity_column >= len(values) or not values[identity_column]:
                        continue
                    key = f"{identity_prefix}[{values[identity_column]}]"
                else:
                    key = f"{prefix}:{row_index}"

                result[key] = translation
        return result

    def parse_source(self, decoded: DecodedText, source: SourceSpec, file_path="") -> Dict[str, str]:
        """Dispatch on the source's header policy."""
        if source.policy == HeaderPolicy.CATALOG:
            return self.parse_catalog(decoded, file_path)
        return self.parse_named_category(decoded, source, file_path)

    def load_source(self, directory, source: SourceSpec) -> Tuple[Dict[str, str], DecodedText]:
        """
        Load one source file.

        Raises:
            SourceError: any failure that should become a diagnostic
        """
        file_path = Path(directory) / source.file_name
        decoded = read_text(file_path)
        entries = self.parse_source(decoded, source, file_path)
        if not entries:
            raise EmptySourceError(
                tr("error_source_empty", name=source.file_name, path=file_path),
                file_path=str(file_path),
            )
        return entries, decoded

    # -------------------------------------------------------------------------
    # Whole directory
    # -------------------------------------------------------------------------

    def is_source_enabled(self, source: SourceSpec) -> bool:
        return self.settings.any_enabled(source.enable_flags)

    def ingest_directory(self, directory, store: TranslationStore, report: LoadReport):
        """
        Merge every enabled source of a directory into store, in list order.

        A failing source adds one diagnostic to report and never stops the
        sources after it.
        """
        directory = Path(directory)
        if not directory.is_dir():
            message = tr("error_directory_missing", path=directory)
            logger.warning(message)
            report.add_diagnostic(message)
            return

        logger.info(f"Using translation directory: {directory}")

        for source in self.sources:
            if not self.is_source_enabled(source):
                logger.debug(f"Skipping disabled source {source.file_name}")
                continue

            file_path = directory / source.file_name
            result = SourceLoadResult(file_name=source.file_name, file_path=str(file_path))
            try:
                entries, decoded = self.load_source(directory, source)
            except SourceError as e:
                logger.warning(e.message)
                result.error = e.message
            except Exception as e:
                logger.exception(f"Failed to load CSV: {file_path}")
                result.error = tr("error_source_read", name=source.file_name, path=file_path, error=e)
            else:
                result.entry_count = len(entries)
                result.encoding = decoded.encoding.value
                result.overridden = store.add_entries(entries, indexed=source.uses_index_keys)
                logger.info(f"Loaded {source.file_name}: {len(entries)} entries")
            report.add_result(result)

    def load_official_fixes(self, file_path, store: TranslationStore) -> int:
        """
        Merge the official-fixes JSON object (key -> string) into store.

        A missing or unreadable file only logs; it is not a source failure.
        """
        path = Path(file_path)
        if not path.is_file():
            logger.warning(f"File not found: {path}")
            return 0
        try:
            with path.open('r', encoding='utf-8-sig') as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.exception(f"Failed to load locale file: {path}")
            return 0

        if not isinstance(data, dict):
            logger.error(f"Locale file is not a JSON object: {path}")
            return 0

        entries = {str(k): str(v) for k, v in data.items() if isinstance(v, str)}
        store.add_entries(entries)
        logger.info(f"Loaded {path.name}: {len(entries)} entries")
        return len(entries)


def build_store(settings: CategoryConfiguration, translation_dir,
                fixes_path=None, sources: Sequence[SourceSpec] = SOURCE_FILES) -> Tuple[TranslationStore, LoadReport]:
    """
    Run one full load into a fresh store.

    Args:
        settings: Configuration snapshot
        translation_dir: Directory holding the CSV sources
        fixes_path: Official-fixes JSON, merged first when the flag is on
        sources: Ordered source list

    Returns:
        (store, report). The store is not visible to anyone yet; publish it
        with TranslationStore.replace().
    """
    store = TranslationStore()
    report = LoadReport(translation_dir=str(translation_dir), preset=settings.preset)
    ingestor = TranslationIngestor(settings, sources)

    if settings.official_fixes_enabled and fixes_path is not None:
        report.total_entries += ingestor.load_official_fixes(fixes_path, store)

    ingestor.ingest_directory(translation_dir, store, report)

    logger.info(f"Total loaded entries: {report.total_entries} (store: {store.count()})")
    if report.has_errors:
        logger.warning(f"{report.failed_count} source(s) failed to load")
    return store, report
