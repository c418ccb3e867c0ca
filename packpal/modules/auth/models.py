# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration and login (auth.users table)
# - JWT token generation and validation

"""
Supabase Auth provides:
- auth.get_user() - Get current user from JWT token

User ids from auth.users are the user_id values stored in event_members,
items (created_by, assigned_to), poll_votes and notifications.
Registration, login and sessions are handled by the client against Supabase.
"""
