#!/usr/bin/env python3
"""
frontmatter.py
--------------
YAML front matter validation for content collections.

Listings silently drop broken entries and images; this validator reports
them so they can be fixed. It checks STRUCTURE (can the resolver use this
entry?), not content.

Validates:
- YAML syntax and front matter presence
- Required fields (title, date) and date format
- Image fields (heroImage, coverImage, featuredImage) are strings
- 'images' is a list of {filename, alt} mappings or strings
- 'edited' dates parse
- Every image reference resolves through the asset index (warning)

Usage:
    keepsake-validate frontmatter blog
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from keepsake.core.exceptions import EntryParseError, EntryValidationError
from keepsake.core.logging_manager import KeepsakeLogger, safe_logger
from keepsake.core.validators import DataValidator
from keepsake.pipeline.resolver import CollectionResolver
from keepsake.utils.md import parse_frontmatter


@dataclass
class FrontmatterIssue:
    """Represents a frontmatter validation issue."""

    file_path: Path
    field_name: str
    severity: str  # error, warning
    message: str
    suggestion: Optional[str] = None
    yaml_value: Optional[Any] = None


@dataclass
class FrontmatterValidationReport:
    """Complete frontmatter validation report."""

    files_checked: int = 0
    files_with_errors: int = 0
    files_with_warnings: int = 0
    total_errors: int = 0
    total_warnings: int = 0
    issues: List[FrontmatterIssue] = field(default_factory=list)

    def add_issue(self, issue: FrontmatterIssue) -> None:
        """Add an issue to the report."""
        self.issues.append(issue)
        if issue.severity == "error":
            self.total_errors += 1
        elif issue.severity == "warning":
            self.total_warnings += 1

    @property
    def has_errors(self) -> bool:
        return self.total_errors > 0

    @property
    def has_warnings(self) -> bool:
        return self.total_warnings > 0

    @property
    def is_healthy(self) -> bool:
        """Check if all files are healthy (no errors)."""
        return not self.has_errors


class FrontmatterValidator:
    """Validates the front matter of every entry in a collection."""

    def __init__(
        self,
        resolver: CollectionResolver,
        logger: Optional[KeepsakeLogger] = None,
    ):
        """
        Initialize frontmatter validator.

        Args:
            resolver: Resolver of the collection to validate
            logger: Optional logger instance
        """
        self.resolver = resolver
        self.logger = logger

    # --- Helper Methods ---

    def _error(
        self,
        file_path: Path,
        field_name: str,
        message: str,
        suggestion: Optional[str] = None,
        yaml_value: Optional[Any] = None,
    ) -> FrontmatterIssue:
        return FrontmatterIssue(file_path, field_name, "error", message, suggestion, yaml_value)

    def _warning(
        self,
        file_path: Path,
        field_name: str,
        message: str,
        suggestion: Optional[str] = None,
        yaml_value: Optional[Any] = None,
    ) -> FrontmatterIssue:
        return FrontmatterIssue(file_path, field_name, "warning", message, suggestion, yaml_value)

    # --- Field validators ---

    def validate_required_fields(
        self, file_path: Path, metadata: Dict[str, Any]
    ) -> List[FrontmatterIssue]:
        """Check title, date and any extra configured required fields."""
        issues = []
        for name in self.resolver.config.required_fields:
            value = metadata.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                issues.append(self._error(
                    file_path, name, f"Missing required field '{name}'",
                    f"Add '{name}: ...' to the front matter",
                ))

        if metadata.get("title") is not None and DataValidator.normalize_string(metadata["title"]) is None:
            issues.append(self._error(
                file_path, "title", "Title must be a non-empty string",
                yaml_value=metadata["title"],
            ))

        if metadata.get("date") is not None and DataValidator.normalize_date(metadata["date"]) is None:
            issues.append(self._error(
                file_path, "date", f"Unparseable date: {metadata['date']!r}",
                "Use YYYY-MM-DD", metadata["date"],
            ))
        return issues

    def validate_image_fields(
        self, file_path: Path, metadata: Dict[str, Any]
    ) -> List[FrontmatterIssue]:
        """Check the designated-image fields and the 'images' list."""
        issues = []
        for name in self.resolver.config.image_fields:
            if name in metadata and metadata[name] is not None and not isinstance(metadata[name], str):
                issues.append(self._warning(
                    file_path, name, f"{name} must be a filename string; ignored",
                    yaml_value=type(metadata[name]).__name__,
                ))

        images = metadata.get("images")
        if images is None:
            return issues
        if not isinstance(images, list):
            issues.append(self._warning(
                file_path, "images", "images must be a list; ignored",
                "Use: images:\n  - filename: img/a.jpg\n    alt: ...",
                type(images).__name__,
            ))
            return issues

        for idx, item in enumerate(images):
            filename = item.get("filename") if isinstance(item, dict) else item
            if not isinstance(filename, str) or not filename.strip():
                issues.append(self._warning(
                    file_path, f"images[{idx}]", "Image entry has no filename; ignored",
                    yaml_value=item,
                ))
        return issues

    def validate_edited_field(self, file_path: Path, edited: Any) -> List[FrontmatterIssue]:
        """Check that every 'edited' value is a date."""
        items = edited if isinstance(edited, (list, tuple)) else [edited]
        return [
            self._warning(file_path, "edited", f"Unparseable edited date: {item!r}", "Use YYYY-MM-DD", item)
            for item in items
            if DataValidator.normalize_date(item) is None
        ]

    def validate_image_resolution(
        self, file_path: Path, metadata: Dict[str, Any]
    ) -> List[FrontmatterIssue]:
        """Warn about image references the asset index cannot resolve."""
        entry_dir = file_path.parent
        issues = []
        for filename in self.resolver.candidate_filenames(metadata, entry_dir):
            if filename.startswith("/"):
                continue
            keys = self.resolver.lookup_keys(entry_dir, filename)
            if not any(self.resolver.asset_index.lookup(k) for k in keys):
                issues.append(self._warning(
                    file_path, "images", f"Image not found: {filename}",
                    f"Expected one of: {', '.join(keys)}",
                ))
        return issues

    # --- Entry points ---

    def validate_file(self, file_path: Path) -> List[FrontmatterIssue]:
        """
        Validate the front matter of a single metadata file.

        Args:
            file_path: Path to the metadata file

        Returns:
            List of issues found
        """
        try:
            content = file_path.read_text(encoding="utf-8")
            metadata, _ = parse_frontmatter(content)
        except (OSError, UnicodeDecodeError) as e:
            return [self._error(file_path, "file", f"Cannot read file: {e}")]
        except (EntryParseError, EntryValidationError) as e:
            return [self._error(file_path, "frontmatter", str(e), "Check the YAML between the --- markers")]

        issues = self.validate_required_fields(file_path, metadata)
        issues.extend(self.validate_image_fields(file_path, metadata))
        if "edited" in metadata and metadata["edited"] is not None:
            issues.extend(self.validate_edited_field(file_path, metadata["edited"]))
        issues.extend(self.validate_image_resolution(file_path, metadata))
        return issues

    def validate_all(self) -> FrontmatterValidationReport:
        """
        Validate every entry of the collection.

        Returns:
            Complete validation report
        """
        report = FrontmatterValidationReport()
        config = self.resolver.config

        for entry_dir in self.resolver.discover():
            file_path = entry_dir / config.metadata_filename
            report.files_checked += 1
            file_issues = self.validate_file(file_path)

            for issue in file_issues:
                report.add_issue(issue)

            if any(i.severity == "error" for i in file_issues):
                report.files_with_errors += 1
            elif any(i.severity == "warning" for i in file_issues):
                report.files_with_warnings += 1

        safe_logger(self.logger).log_operation("validate_frontmatter", {
            "collection": config.name,
            "files_checked": report.files_checked,
            "errors": report.total_errors,
            "warnings": report.total_warnings,
        })
        return report


def format_frontmatter_report(report: FrontmatterValidationReport) -> str:
    """
    Format frontmatter validation report as readable text.

    Args:
        report: Validation report to format

    Returns:
        Formatted report string
    """
    lines = []
    lines.append("\n" + "=" * 60)
    lines.append("FRONTMATTER VALIDATION REPORT")
    lines.append("=" * 60)
    lines.append("")

    clean = report.files_checked - report.files_with_errors - report.files_with_warnings
    lines.append(f"Files Checked: {report.files_checked}")
    lines.append(f"✅ Clean Files: {clean}")
    lines.append(f"⚠️  Files with Warnings: {report.files_with_warnings}")
    lines.append(f"❌ Files with Errors: {report.files_with_errors}")
    lines.append("")
    lines.append(f"Total Warnings: {report.total_warnings}")
    lines.append(f"Total Errors: {report.total_errors}")
    lines.append("")

    if report.is_healthy:
        lines.append("✅ ALL FRONTMATTER VALID")
    else:
        lines.append("❌ FRONTMATTER VALIDATION FAILED")
    lines.append("")

    if report.issues:
        issues_by_file: Dict[Path, List[FrontmatterIssue]] = {}
        for issue in report.issues:
            issues_by_file.setdefault(issue.file_path, []).append(issue)

        lines.append("ISSUES BY FILE:")
        lines.append("")

        for file_path in sorted(issues_by_file):
            file_issues = issues_by_file[file_path]
            errors = [i for i in file_issues if i.severity == "error"]

            icon = "❌" if errors else "⚠️"
            lines.append(f"{icon} {file_path.parent.name}/{file_path.name}")

            for issue in file_issues:
                severity_icon = "❌" if issue.severity == "error" else "⚠️"
                lines.append(f"   {severity_icon} [{issue.field_name}] {issue.message}")
                if issue.suggestion:
                    lines.append(f"      💡 {issue.suggestion}")

            lines.append("")

    lines.append("=" * 60)

    return "\n".join(lines)
