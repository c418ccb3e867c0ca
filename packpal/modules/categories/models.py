# Table: categories
# This file documents the expected database schema
# Actual operations are handled through the Store in service.py

"""
Expected table structure:

categories:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null)
- name: text (not null)
- description: text (nullable)
- color: text (nullable) - e.g. "#22c55e"
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
