#!/usr/bin/env python3
"""
validators
----------
Validation tools for Keepsake content.

- frontmatter: Required fields, dates, image fields and image references
  for every entry of a collection

Usage:
    # Through CLI
    keepsake-validate frontmatter blog

    # Direct import for programmatic use
    from keepsake.validators.frontmatter import FrontmatterValidator
"""

__all__ = ["frontmatter"]
