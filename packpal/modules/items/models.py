# Table: items
# This file documents the expected database schema
# Actual operations are handled through the Store in service.py

"""
Expected table structure:

items:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null)
- category_id: uuid (foreign key to categories.id, not null) - same event as the item
- name: text (not null)
- description: text (nullable)
- quantity: integer (not null, default: 1, > 0)
- status: text (not null, default: 'to_pack') - values: to_pack, packed, delivered
- assigned_to: uuid (nullable) - member responsible for the item
- notes: text (nullable)
- created_by: uuid (not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
