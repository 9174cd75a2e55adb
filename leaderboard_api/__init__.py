"""
Participant API service.

This package provides a FastAPI application that exposes participant CRUD
over HTTP, backed by a SQL database or an in-memory store for development
and tests. It is the remote backend of the leaderboard client.
"""
