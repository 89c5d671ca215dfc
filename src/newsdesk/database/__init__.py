"""Cosmos DB access - client and per-container repositories."""
