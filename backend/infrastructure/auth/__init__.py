"""
Authentication infrastructure: login backend, JWT tokens with the admin
claim, and the cookie gate in front of the Django admin.
"""
