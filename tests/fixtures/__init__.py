"""Test fixture package for content-hub.

Contains fixtures for:
- A mocked asyncio Redis client and the content store over it
- A temporary public directory with sample content
- The FastAPI application and an async HTTP client
"""
