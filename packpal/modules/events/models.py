# Tables: events, event_members
# This file documents the expected database schema
# Actual operations are handled through the Store in service.py

"""
Expected table structure:

events:
- id: uuid (primary key)
- name: text (not null)
- description: text (nullable)
- location: text (nullable)
- start_date: timestamp (nullable)
- end_date: timestamp (nullable)
- invite_code: text (not null, unique)
- created_by: uuid (not null) - creator, owner at creation time
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

event_members:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null)
- user_id: uuid (not null)
- role: text (not null, default: 'member') - values: owner, admin, member, viewer
- created_at: timestamp (default: now())
- unique constraint on (event_id, user_id)

Every event_id foreign key (event_members, categories, items, polls,
notifications) and poll_votes.poll_id is declared ON DELETE CASCADE, so
removing the events row is enough on Postgres. The service still deletes the
children itself for stores without foreign keys.

event_members is the only place roles are stored. The user_roles map on an
event response is built from it on every read.
"""
