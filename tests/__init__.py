"""
Test Suite for the Review Service

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_security.py: Password hashing and identity tokens
- test_credentials.py: Registration and login checks
- test_identity.py: Token resolution and the ownership check
- test_items.py: /api/items endpoints and average rating
- test_reviews.py: Reviews, including ownership-scoped mutations
- test_comments.py: Comments, including ownership-scoped mutations
- test_auth.py: /api/auth endpoints and the end-to-end scenario

Running Tests:
    pip install -e ".[test]"
    pytest
"""
