"""
Tournament API - backend for a sports-tournament management tool

Responsibilities:
- Account registration and login (role-scoped)
- Signed bearer tokens for organizer-only routes
- Tournament and participant registration
- Anonymous listing of tournaments and participants
"""
