"""
auth — User authentication module.

Provides:
  • Signed, expiring access tokens (HMAC-SHA256)
  • Password hashing (bcrypt, work factor 10)
  • Create-account / login / get-user API routes
  • ``get_current_user_id`` FastAPI dependency
"""
