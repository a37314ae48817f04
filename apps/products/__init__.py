"""
Products App - Catalog and Rating Statistics

Products carry denormalized ``average_rating`` and ``review_count`` fields
that are recomputed inside the same transaction as every review insert, so
listings can sort by rating without aggregating on read.

Key Features:
- Category and name filtering shared by listings and hero statistics
- Zero-based pagination with whitelisted sort fields
- Product detail with a 1-5 star rating histogram
- Best-effort AI review summary on product detail
"""
