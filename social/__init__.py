"""
Social application code.

This package contains the application-specific implementations:
- models: Document schemas and indexes (User, Post, Notification)
- schemas: Request bodies
- services: Business logic (auth flow, users, posts, notifications)
- routers: HTTP endpoints under /api
- config: Application settings

Uses generic infrastructure from the common/ package.
"""
