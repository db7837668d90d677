"""
TCG Document Lock
Copyright (c) 2025

A password-gated local vault for photos, documents, text notes, website links
and passwords. Everything stays in one directory on this device; only a
SHA-256 digest of the password is stored, item content is kept as entered.
"""
