#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Keepsake project.

Failures are contained at the smallest unit possible: an unresolvable image
never raises (it is a lookup miss), a broken entry raises one of the entry
errors below and is skipped by listings, and only collection-level failures
reach the caller as ContentLoadError.

Exception Hierarchy:
    Exception (built-in)
    └── KeepsakeError - Base for all project errors
        ├── ContentLoadError - Unexpected failure while loading content (500)
        ├── EntryNotFoundError - Single entry missing or unusable (404)
        ├── EntryParseError - Metadata file unreadable or malformed YAML
        ├── ValidationError - Data validation failures
        │   └── EntryValidationError - Missing/invalid required entry fields
        └── AssetIndexError - Asset index build, manifest or publish failures

Usage:
    from keepsake.core.exceptions import EntryNotFoundError, ContentLoadError

    try:
        page = load_page(resolver, slug)
    except EntryNotFoundError:
        ...  # render 404
    except ContentLoadError:
        ...  # render 500
"""


class KeepsakeError(Exception):
    """
    Base exception for all Keepsake errors.

    Catch this to handle any error raised by the content pipeline.
    """

    pass


class ContentLoadError(KeepsakeError):
    """
    Exception for unexpected failures while loading content.

    Raised when a collection cannot be enumerated (permission errors, a root
    that is a file, ...) or when a single-entry load fails for a reason other
    than the entry being absent or invalid. Maps to a generic server error.

    Attributes:
        status: HTTP-style status code for the route layer

    Examples:
        >>> raise ContentLoadError("Could not load blog posts")
    """

    status = 500


class EntryNotFoundError(KeepsakeError):
    """
    Exception for single-entry requests that cannot be served.

    Raised when the slug does not name an entry directory with a metadata
    file, or when that metadata cannot be parsed or validated.

    Attributes:
        status: HTTP-style status code for the route layer

    Examples:
        >>> raise EntryNotFoundError("Post not found: hello-world")
    """

    status = 404


class EntryParseError(KeepsakeError):
    """
    Exception for entry parsing failures.

    Raised when reading a metadata file fails:
    - YAML syntax errors
    - File read or encoding errors
    - Front matter that is not a mapping

    Examples:
        >>> raise EntryParseError("Invalid YAML frontmatter: mapping values are not allowed here")
    """

    pass


class ValidationError(KeepsakeError):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Missing required fields
    - Invalid date formats
    - Unknown configuration keys

    Examples:
        >>> raise ValidationError("Required field 'title' missing or empty")
    """

    pass


class EntryValidationError(ValidationError):
    """
    Exception for entry-specific validation failures.

    Raised when an entry's front matter lacks a title or date, or the date
    cannot be parsed. Listings skip such entries.

    Examples:
        >>> raise EntryValidationError("Invalid date format: 'next tuesday'")
    """

    pass


class AssetIndexError(KeepsakeError):
    """
    Exception for asset index failures.

    Raised when the asset index cannot be built, a manifest cannot be read
    or written, or publishing assets to the output directory fails.

    Examples:
        >>> raise AssetIndexError("Content root not found: content/")
    """

    pass
