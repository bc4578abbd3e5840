"""
XbeeWeb Test Suite.

- unit/ - Unit tests for individual components
- integration/ - API tests through the FastAPI TestClient
- fixtures/ - In-memory database used instead of MySQL
"""
