"""IPA parsing and pronunciation normalization for wiki-derived dictionaries."""
