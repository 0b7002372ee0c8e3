"""
Services Package

Business logic kept separate from HTTP handling, so it can be called and
tested without a request.

Current services:
- security.py: Password hashing and identity token signing/verification
- credentials.py: User registration and login checks
- identity.py: Token → user resolution and the ownership check
- items.py: Catalog listing and average rating
- reviews.py: Reviews with ownership-scoped update/delete
- comments.py: Comments with ownership-scoped update/delete
"""
