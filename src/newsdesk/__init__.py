"""Newsdesk - block-based article body editing."""
