# Tables: polls, poll_votes
# This file documents the expected database schema
# Actual operations are handled through the Store in service.py

"""
Expected table structure:

polls:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null)
- item_id: uuid (foreign key to items.id, nullable)
- question: text (not null)
- options: jsonb (not null) - list of {id, text, votes}
- status: text (not null, default: 'active') - values: active, closed
- created_by: uuid (not null)
- created_at: timestamp (default: now())
- closed_at: timestamp (nullable)

poll_votes:
- id: uuid (primary key)
- poll_id: uuid (foreign key to polls.id, not null)
- option_id: text (not null) - id of an entry in polls.options
- user_id: uuid (not null)
- created_at: timestamp (default: now())
- unique constraint on (poll_id, user_id)

The vote counters in polls.options are recomputed from poll_votes after every
vote, so they never drift from the vote records.
"""
