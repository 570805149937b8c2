"""Studentdesk - typed command/query dispatch with composable specifications."""
